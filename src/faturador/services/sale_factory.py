from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal

from faturador.models.budget import to_decimal
from faturador.models.sale import ProductSale, Sale, ServiceSale
from faturador.models.tax import Icms, Iss, Tax


class SaleFactory(ABC):
    """Abstract factory pairing a kind of sale with the tax that applies to it."""

    @abstractmethod
    def make(self) -> Sale: ...

    @abstractmethod
    def get_tax(self) -> Tax: ...


class ServiceSaleFactory(SaleFactory):
    def __init__(self, sale_date: datetime, service_name: str) -> None:
        self._sale_date = sale_date
        self._service_name = service_name

    def make(self) -> ServiceSale:
        return ServiceSale(sale_date=self._sale_date, service_name=self._service_name)

    def get_tax(self) -> Tax:
        return Iss()


class ProductSaleFactory(SaleFactory):
    def __init__(self, sale_date: datetime, product_value: Decimal | int | str) -> None:
        self._sale_date = sale_date
        self._product_value = to_decimal(product_value)

    def make(self) -> ProductSale:
        return ProductSale(sale_date=self._sale_date, product_value=self._product_value)

    def get_tax(self) -> Tax:
        return Icms()
