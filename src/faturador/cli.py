from __future__ import annotations

import logging
import sys
from importlib.resources import files
from pathlib import Path

import yaml

from faturador.models.budget import Budget
from faturador.models.invoice import Invoice, clone_invoice
from faturador.services.invoice_builder import new_builder
from faturador.utils.validators import validate_cnpj, validate_items_count, validate_monetary

logger = logging.getLogger(__name__)

USAGE = """Uso:
  faturador init                        cria configuracao e banco de dados
  faturador emitir <arquivo.yaml> [--copias N]
                                        emite a nota e N copias
  faturador listar [servico|produto]    lista as notas emitidas"""


def build_from_dict(data: dict, rates: dict) -> tuple[str, Invoice]:
    """Build a finalized invoice from a YAML-loaded description.

    Returns the invoice kind and the invoice. Raises KeyError for missing
    required fields and ValueError for invalid ones.
    """
    if not isinstance(data, dict):
        raise ValueError("Arquivo da nota deve conter um mapeamento (campo: valor)")
    items = data.get("itens") or []
    if not isinstance(items, list):
        raise ValueError("itens: deve ser uma lista")
    kind = str(data["tipo"])
    builder = new_builder(kind, rates.get(kind))
    builder.with_company(str(data["empresa"]), validate_cnpj(str(data["cnpj"])))
    for i, item in enumerate(items, start=1):
        if not isinstance(item, dict):
            raise ValueError(f"itens: item {i} deve ser um mapeamento (valor, quantidade)")
        builder.with_item(
            Budget(
                validate_monetary(item["valor"]),
                validate_items_count(item.get("quantidade", 0)),
            )
        )
    if data.get("nota") is not None:
        builder.with_note(str(data["nota"]))
    return kind, builder.build()


def _init_config() -> None:
    """Copy bundled templates to the config dir and create the database."""
    from faturador.config import get_config_dir, get_data_dir, get_database_path
    from faturador.utils.connection import LazyConnection

    config_dir = get_config_dir()
    data_dir = get_data_dir()
    templates = files("faturador") / "templates"

    config_dir.mkdir(parents=True, exist_ok=True)
    data_dir.mkdir(parents=True, exist_ok=True)

    copied = 0
    for rel in ["taxas.yaml.example", "fatura.yaml.example"]:
        dest = config_dir / rel
        if dest.exists():
            print(f"  já existe: {dest}")
            continue
        src = templates / rel
        with src.open("rb") as f:
            dest.write_bytes(f.read())
        print(f"  criado: {dest}")
        copied += 1

    db_path = get_database_path()
    with LazyConnection(db_path) as db:
        db.get()
    print(f"  banco de dados: {db_path}")

    print()
    print(f"Configuração: {config_dir}")
    print(f"Dados:   {data_dir}")
    print()
    if copied:
        print("Próximos passos:")
        print(f"  1. cp {config_dir / 'taxas.yaml.example'} {config_dir / 'taxas.yaml'} (opcional)")
        print(f"  2. Edite uma cópia de {config_dir / 'fatura.yaml.example'}")
        print("  3. Execute: faturador emitir fatura.yaml")
    else:
        print("Nenhum arquivo novo criado (todos já existiam).")


def _parse_copies(args: list[str]) -> int:
    """Parse ``--copias N`` (or a bare ``N``); no arguments means zero copies."""
    if not args:
        return 0
    if args[0] == "--copias" and len(args) == 2:
        value = args[1]
    elif len(args) == 1:
        value = args[0]
    else:
        raise ValueError(args)
    copies = int(value)
    if copies < 0:
        raise ValueError(value)
    return copies


def _emit(argv: list[str]) -> int:
    """Build the invoice described in argv[0] plus N clones; returns the exit code."""
    from faturador.config import get_log_path, load_tax_rates, load_yaml
    from faturador.services.log_manager import FileLogManager
    from faturador.utils.formatters import format_invoice
    from faturador.utils.registry import add_invoice

    if not argv:
        print(USAGE)
        return 1
    path = Path(argv[0])
    if not path.is_file():
        print(f"Erro: arquivo não encontrado: {path}")
        return 1
    try:
        copies = _parse_copies(argv[1:])
    except ValueError:
        print(f"Erro: número de cópias inválido: {' '.join(argv[1:])}")
        return 1

    try:
        kind, invoice = build_from_dict(load_yaml(path) or {}, load_tax_rates())
    except KeyError as e:
        print(f"Erro: campo obrigatório ausente: {e}")
        return 1
    except (ValueError, yaml.YAMLError) as e:
        print(f"Erro: {e}")
        return 1

    log_manager = FileLogManager(get_log_path())
    invoices = [invoice] + [clone_invoice(invoice) for _ in range(copies)]
    for inv in invoices:
        label = "Nota"
        try:
            entry = add_invoice(inv, kind)
            label = f"Nota #{entry['numero']}"
        except Exception:
            logger.warning("Failed to register invoice", exc_info=True)
        print(label)
        print(format_invoice(inv))
        print()
        log_manager.log("info", f"{label} ({kind}) emitida para {inv.company_name}")
    return 0


def _list(argv: list[str]) -> None:
    from faturador.utils.formatters import format_brl
    from faturador.utils.registry import list_invoices

    entries = list_invoices(argv[0] if argv else None)
    if not entries:
        print("Nenhuma nota registrada.")
        return
    for e in entries:
        tax = format_brl(e["imposto"]) if e.get("imposto") is not None else "-"
        print(
            f"#{e['numero']:<4} {e['tipo']:<8} {e.get('empresa') or '-':<30} "
            f"{format_brl(e['total']):>16} {tax:>16}  {e['emitida_em']}"
        )


def main() -> None:
    """Entry point for the faturador CLI."""
    args = sys.argv[1:]
    if not args or args[0] in ("-h", "--help", "ajuda"):
        print(USAGE)
        return

    command, rest = args[0], args[1:]
    if command == "init":
        _init_config()
    elif command == "emitir":
        code = _emit(rest)
        if code:
            sys.exit(code)
    elif command == "listar":
        _list(rest)
    else:
        print(f"Comando desconhecido: {command}")
        print(USAGE)
        sys.exit(1)


if __name__ == "__main__":
    main()
