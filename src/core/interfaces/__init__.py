"""Interfaces/abstracciones del Core.

Por qué:
- Define el contrato (Protocol) de fuente de líneas que implementan los adaptadores.
- El servicio de emisión depende de esa abstracción, no de stdin ni de ficheros.
"""
