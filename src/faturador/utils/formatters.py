from __future__ import annotations

from decimal import Decimal

from faturador.models.invoice import Invoice


def format_brl(value: Decimal | str) -> str:
    """Format a numeric value as R$ X.XXX,XX."""
    d = Decimal(value)
    formatted = f"{d:,.2f}".replace(",", "X").replace(".", ",").replace("X", ".")
    return f"R$ {formatted}"


def format_cnpj(value: str) -> str:
    """Format 14 bare digits as XX.XXX.XXX/XXXX-XX; anything else is returned as-is."""
    if len(value) != 14 or not value.isdigit():
        return value
    return f"{value[:2]}.{value[2:5]}.{value[5:8]}/{value[8:12]}-{value[12:]}"


def format_invoice(invoice: Invoice) -> str:
    """Render a multi-line, human readable invoice summary."""
    company = invoice.company_name or "-"
    cnpj = format_cnpj(invoice.cnpj) if invoice.cnpj else "-"
    tax = format_brl(invoice.tax_value) if invoice.tax_value is not None else "-"
    lines = [
        f"Empresa:  {company} ({cnpj})",
        f"Emissao:  {invoice.issue_date.strftime('%d/%m/%Y %H:%M:%S')}",
    ]
    for i, item in enumerate(invoice.items, start=1):
        lines.append(f"  {i}. {format_brl(item.value)} ({item.items_count} itens)")
    lines.append(f"Total:    {format_brl(invoice.total_value())}")
    lines.append(f"Imposto:  {tax}")
    if invoice.note:
        lines.append(f"Nota:     {invoice.note}")
    return "\n".join(lines)
