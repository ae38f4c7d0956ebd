"""Contrato de presentación de literales.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el driver imprima literales "crudos" y validados de forma
  intercambiable, y que los tests usen dobles sin acoplarse a los modelos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class AddressPrinter(Protocol):
    """Contrato mínimo para algo que se imprime como una línea de salida."""

    def format(self) -> str:
        """Devuelve la línea de texto (sin salto de línea final)."""

        ...
