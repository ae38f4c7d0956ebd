"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce stdin/stdout ni la CLI: solo literales y veredictos.
"""
