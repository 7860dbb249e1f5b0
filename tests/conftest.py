from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from unittest.mock import patch

import pytest

from faturador.config import BRT
from faturador.models.budget import Budget
from faturador.models.invoice import Invoice
from faturador.services.invoice_builder import ServiceInvoiceBuilder


# --- Budget / invoice fixtures ---


@pytest.fixture
def budget() -> Budget:
    return Budget(Decimal("1000"), 6)


@pytest.fixture
def service_invoice(budget: Budget) -> Invoice:
    """Service invoice from the reference scenario: total 1000, tax 300."""
    return (
        ServiceInvoiceBuilder()
        .with_company("Test", "12345")
        .with_item(budget)
        .with_note("test")
        .build()
    )


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2030, 1, 2, 10, 30, 0, tzinfo=BRT)


@pytest.fixture
def invoice_dict() -> dict:
    return {
        "tipo": "servico",
        "empresa": "ACME SOFTWARE LTDA",
        "cnpj": "11.222.333/0001-81",
        "nota": "Desenvolvimento de software",
        "itens": [
            {"valor": 1000, "quantidade": 6},
            {"valor": "250.50", "quantidade": 1},
        ],
    }


# --- Directory fixtures ---


@pytest.fixture
def data_dir(tmp_path):
    d = tmp_path / "data"
    with patch("faturador.config.get_data_dir", return_value=d):
        yield d


@pytest.fixture
def config_dir(tmp_path):
    d = tmp_path / "config"
    d.mkdir()
    with patch("faturador.config.get_config_dir", return_value=d):
        yield d
