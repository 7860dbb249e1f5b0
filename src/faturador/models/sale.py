from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal


@dataclass(frozen=True)
class Sale:
    sale_date: datetime


@dataclass(frozen=True)
class ServiceSale(Sale):
    service_name: str


@dataclass(frozen=True)
class ProductSale(Sale):
    product_value: Decimal
