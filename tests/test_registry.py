from __future__ import annotations

import json
from unittest.mock import patch

from faturador.models.budget import Budget
from faturador.services.invoice_builder import ProductInvoiceBuilder
from faturador.utils.registry import (
    _backup_corrupt,
    add_invoice,
    list_invoices,
)


def test_add_and_list(data_dir, service_invoice):
    entry = add_invoice(service_invoice, "servico")
    assert entry["numero"] == 1
    assert entry["tipo"] == "servico"
    assert entry["empresa"] == "Test"
    assert entry["cnpj"] == "12345"
    assert entry["total"] == "1000"
    assert entry["imposto"] == "300.00"
    assert entry["itens"] == 1
    assert entry["nota"] == "test"
    assert entry["emitida_em"] == service_invoice.issue_date.isoformat()
    assert list_invoices() == [entry]


def test_numbers_increase(data_dir, service_invoice):
    first = add_invoice(service_invoice, "servico")
    second = add_invoice(service_invoice, "servico")
    assert (first["numero"], second["numero"]) == (1, 2)


def test_list_filters_by_kind(data_dir, service_invoice):
    product = ProductInvoiceBuilder().with_item(Budget(10, 1)).build()
    add_invoice(service_invoice, "servico")
    add_invoice(product, "produto")
    assert [e["tipo"] for e in list_invoices("produto")] == ["produto"]
    assert len(list_invoices()) == 2


def test_list_empty(data_dir):
    assert list_invoices() == []


def test_persisted_as_json(data_dir, service_invoice):
    add_invoice(service_invoice, "servico")
    data = json.loads((data_dir / "invoices.json").read_text())
    assert data[0]["numero"] == 1


def test_number_follows_highest_existing(data_dir, service_invoice):
    data_dir.mkdir(parents=True)
    (data_dir / "invoices.json").write_text(json.dumps([{"numero": 7, "tipo": "produto"}]))
    assert add_invoice(service_invoice, "servico")["numero"] == 8


def test_corrupt_registry_backed_up(data_dir, service_invoice):
    data_dir.mkdir(parents=True)
    (data_dir / "invoices.json").write_text("{not json")
    assert list_invoices() == []
    backups = list(data_dir.glob("invoices.json.corrupt.*"))
    assert len(backups) == 1
    assert add_invoice(service_invoice, "servico")["numero"] == 1


def test_unfinalized_invoice_has_no_tax(data_dir):
    from faturador.models.invoice import Invoice

    entry = add_invoice(Invoice(), "servico")
    assert entry["imposto"] is None
    assert entry["empresa"] is None


def test_backup_corrupt_renames(tmp_path):
    path = tmp_path / "x.json"
    path.write_text("garbage")
    backup = _backup_corrupt(path)
    assert not path.exists()
    assert backup.read_text() == "garbage"


def test_custom_registry_path(tmp_path, service_invoice):
    rp = tmp_path / "invoices.json"
    with (
        patch("faturador.utils.registry._registry_path", return_value=rp),
        patch("faturador.utils.registry._locked"),
    ):
        add_invoice(service_invoice, "servico")
        assert [e["numero"] for e in list_invoices()] == [1]
    assert rp.is_file()
