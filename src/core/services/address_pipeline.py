"""Address presentation pipeline.

The CLI delegates to these helpers to turn raw tokens into printable domain
values, which keeps printing and stream handling out of the core and lets
tests drive the flow without a terminal.
"""

from __future__ import annotations

import logging
from typing import Iterable, Sequence

from core.domain.models import AddressLiteral, ValidatedAddressLiteral
from core.interfaces.printer import AddressPrinter

logger = logging.getLogger(__name__)


def build_addresses(tokens: Sequence[str], *, strict: bool = False) -> list[AddressLiteral]:
    """Build the driver's values: the first token raw, every other one validated."""

    if not tokens:
        return []

    first, *rest = tokens
    addresses: list[AddressLiteral] = [AddressLiteral(literal=first)]
    addresses.extend(validate_all(rest, strict=strict))
    return addresses


def validate_all(literals: Iterable[str], *, strict: bool = False) -> list[ValidatedAddressLiteral]:
    """Validate each literal, preserving input order."""

    results = [
        ValidatedAddressLiteral(literal=literal, strict_zero_padding=strict)
        for literal in literals
    ]
    logger.debug(
        "Validated %d literal(s), %d correct",
        len(results),
        sum(1 for r in results if r.is_valid),
    )
    return results


def render_lines(printers: Iterable[AddressPrinter]) -> list[str]:
    return [printer.format() for printer in printers]
