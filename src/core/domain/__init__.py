"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (invocación, contadores) y la
  taxonomía de errores.
- El dominio no conoce la CLI ni los streams concretos: solo conceptos del problema.
"""
