"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos del payload (Pydantic v2) y las reglas
  para decidir si un registro está bien formado.
- El dominio no conoce HTTP ni CLI: solo conceptos del problema.
"""
