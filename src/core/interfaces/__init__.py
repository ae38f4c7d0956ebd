"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los modelos del dominio.
- Permite invertir dependencias: la CLI depende de abstracciones.
"""
