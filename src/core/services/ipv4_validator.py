"""Validación de literales IPv4 (dotted-quad).

Por qué aquí:
- Es la única lógica "de negocio" del proyecto; vive en `core/` sin conocer
  la CLI ni el origen de los datos.
- Es una función pura y total: nunca lanza excepciones ante un `str`.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

SEGMENT_COUNT = 4
SEGMENT_MAX = 255
_ASCII_DIGITS = frozenset("0123456789")


def split_segments(value: str) -> list[str]:
    """Divide por `.` conservando segmentos vacíos (inicio/fin/doble punto)."""

    return value.split(".")


def _parse_segment(segment: str) -> int | None:
    if not segment or not set(segment) <= _ASCII_DIGITS:
        return None
    try:
        return int(segment)
    except ValueError:
        # Integer-string conversion limit exceeded.
        return None


def explain(value: str, *, strict: bool = False) -> str | None:
    """Return why `value` is not a valid IPv4 literal, or None when it is."""

    segments = split_segments(value)
    if len(segments) != SEGMENT_COUNT:
        return f"expected {SEGMENT_COUNT} segments, got {len(segments)}"

    for index, segment in enumerate(segments, start=1):
        if not segment:
            return f"segment {index} is empty"
        number = _parse_segment(segment)
        if number is None:
            return f"segment {index} is not a decimal number"
        if number > SEGMENT_MAX:
            return f"segment {index} is out of range (0..{SEGMENT_MAX})"
        if strict and len(segment) > 1 and segment.startswith("0"):
            return f"segment {index} has leading zeros"

    return None


def validate(value: str, *, strict: bool = False) -> bool:
    """Decide si `value` es un literal IPv4 sintácticamente válido.

    Reglas:
    - exactamente 4 segmentos separados por `.`; los vacíos no se descartan
    - cada segmento: solo dígitos ASCII, valor en [0, 255]
    - ceros a la izquierda aceptados salvo en modo `strict`
    """

    reason = explain(value, strict=strict)
    if reason is not None:
        logger.debug("Rejected %r: %s", value, reason)
        return False
    return True
