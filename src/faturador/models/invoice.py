from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import datetime
from decimal import Decimal

from faturador.config import BRT
from faturador.models.budget import Budget


def _now_brt() -> datetime:
    return datetime.now(BRT)


@dataclass
class Invoice:
    """Invoice (nota fiscal) assembled by an InvoiceBuilder.

    Identification fields stay None until the builder sets them. ``tax_value``
    is None until ``build()`` runs.
    """

    cnpj: str | None = None
    company_name: str | None = None
    items: list[Budget] = field(default_factory=list)
    note: str | None = None
    issue_date: datetime = field(default_factory=_now_brt)
    tax_value: Decimal | None = None

    def total_value(self) -> Decimal:
        """Sum of item values, accumulated in insertion order."""
        total = Decimal("0")
        for item in self.items:
            total += item.value
        return total

    def copy_with(self, *, issue_date: datetime | None = None, deep: bool = False) -> Invoice:
        """Return a new invoice derived from this one (prototype copy).

        Scalars are copied as-is, ``issue_date`` is reset to *issue_date* or
        the current time, and ``items`` is always a new list. Budget entries
        are shared unless *deep* is set, in which case each one is duplicated.
        """
        if deep:
            items = [Budget(item.value, item.items_count) for item in self.items]
        else:
            items = list(self.items)
        return replace(
            self,
            items=items,
            issue_date=issue_date if issue_date is not None else _now_brt(),
        )


def clone_invoice(invoice: Invoice, *, deep: bool = False) -> Invoice:
    """Clone *invoice* into an independent document with a fresh issue date."""
    return invoice.copy_with(deep=deep)
