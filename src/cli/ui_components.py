"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- La salida "de contrato" (líneas `Correct` / `Not Correct`) no pasa por
  aquí; estas tablas son solo para uso interactivo.
"""

from __future__ import annotations

from typing import Iterable

from rich.table import Table
from rich.text import Text

from core.domain.models import ValidatedAddressLiteral
from core.services.ipv4_validator import explain


def build_verdicts_table(addresses: Iterable[ValidatedAddressLiteral]) -> Table:
    """Tabla Rich con literal, veredicto y motivo del rechazo."""

    table = Table(title="IPv4 literals")
    table.add_column("Literal", style="cyan", no_wrap=True)
    table.add_column("Verdict", no_wrap=True)
    table.add_column("Reason", style="dim")

    for address in addresses:
        if address.is_valid:
            verdict = Text("Correct", style="green")
            reason = Text("")
        else:
            verdict = Text("Not Correct", style="red")
            reason = Text(explain(address.literal, strict=address.strict_zero_padding) or "")
        # Text() avoids interpreting user input as Rich markup.
        table.add_row(Text(address.literal), verdict, reason)
    return table
