"""Modelos, errores y entidades del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y la jerarquía de
errores. El dominio no conoce HTTP ni la CLI.
"""
