"""Modelos y entidades del dominio.

Por qué:
- Aquí viven el descriptor de la petición, el realm normalizado y los eventos
  de diagnóstico (Pydantic v2).
- El dominio no conoce HTTP, CLI, ni SDKs: solo conceptos del problema.
"""
