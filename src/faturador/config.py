from __future__ import annotations

import os
from datetime import timedelta, timezone
from decimal import Decimal, InvalidOperation
from pathlib import Path

import platformdirs
import yaml
from dotenv import load_dotenv

APP_NAME = "faturador"


def _resolve_config_dir_for_dotenv() -> Path | None:
    """Resolve config dir for .env loading without depending on env vars from .env itself.

    Only checks sources available before .env is loaded (shell env var, dev
    layout, an already existing platformdirs directory).
    """
    from_env = os.environ.get("FATURADOR_CONFIG_DIR")
    if from_env:
        return Path(from_env)
    project_root = Path(__file__).resolve().parent.parent.parent
    candidate = project_root / "config"
    if candidate.is_dir():
        return candidate
    pd = Path(platformdirs.user_config_dir(APP_NAME))
    if pd.is_dir():
        return pd
    return None


# Load .env: cwd first (highest priority), then config dir (won't override)
load_dotenv()
_cfg_dir = _resolve_config_dir_for_dotenv()
if _cfg_dir is not None:
    load_dotenv(_cfg_dir / ".env")


def _resolve_dir(env_var: str, default_subdir: str, kind: str) -> Path:
    """Resolve a directory from env var, repo layout, or platform default.

    Priority: 1) env var, 2) dev repo layout, 3) platformdirs user directory.
    """
    from_env = os.environ.get(env_var)
    if from_env:
        return Path(from_env)
    # Development layout: src/faturador/config.py -> ../../.. = project root
    project_root = Path(__file__).resolve().parent.parent.parent
    candidate = project_root / default_subdir
    if candidate.is_dir():
        return candidate
    if kind == "config":
        return Path(platformdirs.user_config_dir(APP_NAME))
    return Path(platformdirs.user_data_dir(APP_NAME))


def get_config_dir() -> Path:
    """Resolve config directory. Re-evaluated on each call to pick up env changes."""
    return _resolve_dir("FATURADOR_CONFIG_DIR", "config", kind="config")


def get_data_dir() -> Path:
    """Resolve data directory. Re-evaluated on each call to pick up env changes."""
    return _resolve_dir("FATURADOR_DATA_DIR", "data", kind="data")


BRT = timezone(timedelta(hours=-3))

DEFAULT_TAX_RATES: dict[str, Decimal] = {
    "servico": Decimal("0.30"),
    "produto": Decimal("0.10"),
}


def get_database_path() -> Path:
    """Return the SQLite database path (FATURADOR_DB_PATH or data dir default)."""
    from_env = os.environ.get("FATURADOR_DB_PATH")
    if from_env:
        return Path(from_env)
    return get_data_dir() / "database.sqlite3"


def get_log_path() -> Path:
    """Return the file the CLI appends its log lines to."""
    return get_data_dir() / "logs" / "faturador.log"


# --- YAML config ---


def load_yaml(path: Path) -> dict:
    """Load and parse a YAML file, returning the top-level dict."""
    return yaml.safe_load(path.read_text())


def load_tax_rates() -> dict[str, Decimal]:
    """Return the tax rate per invoice kind.

    Defaults are overlaid by config/taxas.yaml when present, e.g.::

        produto: 0.18
    """
    rates = dict(DEFAULT_TAX_RATES)
    path = get_config_dir() / "taxas.yaml"
    if not path.is_file():
        return rates
    data = load_yaml(path) or {}
    if not isinstance(data, dict):
        raise ValueError(f"{path.name}: deve conter um mapeamento tipo: aliquota")
    for kind, rate in data.items():
        try:
            d = Decimal(str(rate))
            if not d.is_finite():
                raise InvalidOperation
        except InvalidOperation:
            raise ValueError(f"{path.name}: aliquota invalida para '{kind}': '{rate}'") from None
        rates[str(kind)] = d
    return rates
