from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation

from faturador.services.exceptions import InvalidArgumentError


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Coerce a numeric input to Decimal; floats go through str() to keep 0.1 as 0.1."""
    if isinstance(value, float):
        value = str(value)
    try:
        d = Decimal(value)
    except (InvalidOperation, TypeError):
        raise InvalidArgumentError(f"Valor numerico invalido: '{value}'") from None
    if not d.is_finite():
        raise InvalidArgumentError(f"Valor numerico invalido: '{value}'")
    return d


@dataclass(frozen=True)
class Budget:
    """Monetary item (orçamento): an amount and how many items it covers."""

    value: Decimal
    items_count: int = 0

    def __post_init__(self) -> None:
        value = to_decimal(self.value)
        if value < 0:
            raise InvalidArgumentError(f"Valor nao pode ser negativo: '{self.value}'")
        if isinstance(self.items_count, bool) or not isinstance(self.items_count, int):
            raise InvalidArgumentError(f"Quantidade de itens invalida: '{self.items_count}'")
        if self.items_count < 0:
            raise InvalidArgumentError(
                f"Quantidade de itens nao pode ser negativa: '{self.items_count}'"
            )
        object.__setattr__(self, "value", value)
