"""Formatos de respuesta soportados por GetUserRealm.

El endpoint acepta `xml=1` o `json=1` en la query y devuelve esquemas
distintos para cada uno. Vive en el dominio para que la config, los servicios
y la CLI compartan una única fuente de verdad.
"""

from __future__ import annotations

from enum import Enum


class ResponseFormat(str, Enum):
    """Formato pedido al endpoint."""

    XML = "xml"
    JSON = "json"

    @property
    def query_flag(self) -> str:
        """Nombre del parámetro de query que activa este formato."""

        return self.value

    def label(self) -> str:
        return "JSON" if self is ResponseFormat.JSON else "XML"
