from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from faturador.models.budget import Budget, to_decimal
from faturador.models.invoice import Invoice
from faturador.services.exceptions import IllegalStateError, InvalidArgumentError


class InvoiceBuilder(ABC):
    """Stepwise construction of an Invoice, finalized by build().

    Each subclass owns the tax rate for its invoice category. Mutators return
    the builder itself so calls can be chained; once build() has run the
    builder only hands back the same finalized invoice.
    """

    @property
    @abstractmethod
    def TAX_RATE(self) -> Decimal:
        """Default tax rate for the category; subclasses set it as a class attribute."""

    def __init__(self, tax_rate: Decimal | int | float | str | None = None) -> None:
        rate = self.TAX_RATE if tax_rate is None else to_decimal(tax_rate)
        if rate < 0:
            raise InvalidArgumentError(f"Aliquota nao pode ser negativa: '{tax_rate}'")
        self.tax_rate = rate
        self._invoice = Invoice()
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def _ensure_accumulating(self) -> None:
        if self._finalized:
            raise IllegalStateError("Nota ja finalizada: build() foi chamado")

    def with_company(self, name: str, cnpj: str) -> InvoiceBuilder:
        self._ensure_accumulating()
        self._invoice.company_name = name
        self._invoice.cnpj = cnpj
        return self

    def with_item(self, budget: Budget) -> InvoiceBuilder:
        self._ensure_accumulating()
        self._invoice.items.append(budget)
        return self

    def with_note(self, note: str) -> InvoiceBuilder:
        self._ensure_accumulating()
        self._invoice.note = note
        return self

    def build(self) -> Invoice:
        """Compute the tax value and return the invoice. Repeated calls are no-ops.

        The returned invoice is the live aggregate: editing its items afterwards
        does not update ``tax_value``.
        """
        if not self._finalized:
            self._invoice.tax_value = self._invoice.total_value() * self.tax_rate
            self._finalized = True
        return self._invoice


class ServiceInvoiceBuilder(InvoiceBuilder):
    TAX_RATE = Decimal("0.30")


class ProductInvoiceBuilder(InvoiceBuilder):
    TAX_RATE = Decimal("0.10")


BUILDERS: dict[str, type[InvoiceBuilder]] = {
    "servico": ServiceInvoiceBuilder,
    "produto": ProductInvoiceBuilder,
}


def new_builder(kind: str, tax_rate: Decimal | None = None) -> InvoiceBuilder:
    """Return a fresh builder for the invoice *kind* ("servico" or "produto")."""
    try:
        builder_cls = BUILDERS[kind]
    except KeyError:
        valid = ", ".join(sorted(BUILDERS))
        raise InvalidArgumentError(f"Tipo de nota invalido: '{kind}' (use {valid})") from None
    return builder_cls(tax_rate)
