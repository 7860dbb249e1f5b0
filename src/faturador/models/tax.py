from __future__ import annotations

from abc import ABC, abstractmethod
from decimal import Decimal

from faturador.models.budget import Budget


class Tax(ABC):
    """Tax policy applied to a budget value."""

    RATE: Decimal

    @abstractmethod
    def calculate(self, budget: Budget) -> Decimal: ...


class Icms(Tax):
    """ICMS: state tax on goods."""

    RATE = Decimal("0.10")

    def calculate(self, budget: Budget) -> Decimal:
        return budget.value * self.RATE


class Iss(Tax):
    """ISS: municipal tax on services."""

    RATE = Decimal("0.06")

    def calculate(self, budget: Budget) -> Decimal:
        return budget.value * self.RATE
