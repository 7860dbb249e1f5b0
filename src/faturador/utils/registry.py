"""Local invoice registry. Remembers every invoice issued through the CLI.

Entries live in a JSON list in the data dir; each one is a flat summary of
the finalized invoice plus a sequential ``numero``.
"""

from __future__ import annotations

import json
import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from filelock import FileLock

from faturador import config as _config
from faturador.models.invoice import Invoice

logger = logging.getLogger(__name__)


def _registry_path() -> Path:
    return _config.get_data_dir() / "invoices.json"


def _backup_corrupt(path: Path) -> Path:
    """Rename a corrupt file to a timestamped backup before it gets overwritten."""
    ts = datetime.now(UTC).strftime("%Y%m%dT%H%M%S")
    backup = path.with_name(f"{path.name}.corrupt.{ts}")
    path.rename(backup)
    logger.warning("Corrupt file backed up: %s → %s", path, backup)
    return backup


@contextmanager
def _locked() -> Iterator[None]:
    """Hold an exclusive file lock during registry read-modify-write."""
    rp = _registry_path()
    rp.parent.mkdir(parents=True, exist_ok=True)
    lock = FileLock(rp.with_suffix(".lock"))
    with lock:
        yield


def _load() -> list[dict[str, Any]]:
    rp = _registry_path()
    if not rp.exists():
        return []
    try:
        return json.loads(rp.read_text())
    except (json.JSONDecodeError, ValueError):
        _backup_corrupt(rp)
        return []


def _save(entries: list[dict[str, Any]]) -> None:
    rp = _registry_path()
    rp.parent.mkdir(parents=True, exist_ok=True)
    tmp = rp.with_suffix(".tmp")
    tmp.write_text(json.dumps(entries, indent=2, ensure_ascii=False) + "\n")
    os.replace(tmp, rp)


def _summarize(invoice: Invoice, kind: str) -> dict[str, Any]:
    tax = invoice.tax_value
    return {
        "tipo": kind,
        "cnpj": invoice.cnpj,
        "empresa": invoice.company_name,
        "nota": invoice.note,
        "itens": len(invoice.items),
        "total": str(invoice.total_value()),
        "imposto": str(tax) if tax is not None else None,
        "emitida_em": invoice.issue_date.isoformat(),
    }


def list_invoices(kind: str | None = None) -> list[dict[str, Any]]:
    """Return all registered invoices, optionally filtered by kind."""
    with _locked():
        entries = _load()
    if kind:
        entries = [e for e in entries if e.get("tipo") == kind]
    return entries


def add_invoice(invoice: Invoice, kind: str) -> dict[str, Any]:
    """Register a finalized invoice and return the stored entry."""
    with _locked():
        entries = _load()
        numero = max((e.get("numero", 0) for e in entries), default=0) + 1
        entry: dict[str, Any] = {"numero": numero, **_summarize(invoice, kind)}
        entries.append(entry)
        _save(entries)
        return entry

