"""Exportación JSON de veredictos.

Por qué JSON:
- Interoperabilidad con otras herramientas y pipelines (`jq`, scripts).
- Misma información que la salida de texto, pero estructurada.
"""

from __future__ import annotations

import json
from typing import Iterable

from core.domain.models import AddressLiteral, AddressVerdict


def render_verdicts_json(addresses: Iterable[AddressLiteral]) -> str:
    """Serializa los literales a un array JSON con formato estable."""

    payload = [AddressVerdict.from_address(a).model_dump(mode="json") for a in addresses]
    return json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n"
