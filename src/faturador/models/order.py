from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from faturador.config import BRT
from faturador.models.budget import Budget


@dataclass(frozen=True)
class Order:
    """Order (pedido) placed by a client for a budget."""

    client_name: str
    budget: Budget
    created_at: datetime

    @classmethod
    def create(cls, client_name: str, budget: Budget) -> Order:
        """Create an Order stamped with the current time."""
        return cls(client_name=client_name, budget=budget, created_at=datetime.now(BRT))
