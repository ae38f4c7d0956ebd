"""Lectura de tokens desde un stream de texto.

Por qué un adaptador:
- El Core no sabe de stdin/archivos; solo recibe strings.
- Centraliza la política ante entrada insuficiente: fallar rápido con un
  error claro, nunca validar un string vacío en lugar de un token ausente.
"""

from __future__ import annotations

import logging
from typing import Iterator, TextIO

logger = logging.getLogger(__name__)


class InsufficientInputError(ValueError):
    """La entrada terminó antes de reunir los tokens necesarios."""

    def __init__(self, expected: int, received: int) -> None:
        self.expected = expected
        self.received = received
        super().__init__(
            f"unexpected end of input: expected {expected} address(es), got {received}"
        )


def iter_tokens(stream: TextIO) -> Iterator[str]:
    """Genera tokens separados por espacios en blanco, línea a línea."""

    for line in stream:
        yield from line.split()


def read_tokens(stream: TextIO, count: int) -> list[str]:
    """Lee exactamente `count` tokens; el resto de la entrada se ignora."""

    tokens: list[str] = []
    for token in iter_tokens(stream):
        tokens.append(token)
        if len(tokens) == count:
            logger.debug("Read %d token(s)", count)
            return tokens
    raise InsufficientInputError(expected=count, received=len(tokens))
