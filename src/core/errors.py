"""Errores de la consulta de realm.

Todos heredan de `RealmLookupError` para que el caller pueda capturar la
familia completa. `kind` es el nombre estable que viaja en los eventos de
diagnóstico.
"""

from __future__ import annotations


class RealmLookupError(Exception):
    """Base de todos los fallos de `get_realm`."""

    kind = "realm_lookup_error"


class UnexpectedStatusError(RealmLookupError):
    """El endpoint respondió con un status distinto de 200."""

    kind = "unexpected_status"

    def __init__(self, status_code: int) -> None:
        super().__init__(f"Unexpected HTTP status code: {status_code}")
        self.status_code = status_code


class InvalidJsonError(RealmLookupError):
    """Cuerpo declarado como JSON que no decodifica o no es un objeto."""

    kind = "invalid_json"


class MalformedXmlError(RealmLookupError):
    """Documento XML ilegible o sin el elemento raíz `RealmInfo`."""

    kind = "malformed_xml"


class UnsupportedContentTypeError(RealmLookupError):
    kind = "unsupported_content_type"

    def __init__(self, content_type: str | None) -> None:
        super().__init__(f"Unsupported content type: {content_type or '<none>'}")
        self.content_type = content_type


class InvalidRequestError(RealmLookupError):
    """Entrada rechazada antes de enviar nada (dominio vacío, formato desconocido)."""

    kind = "invalid_request"


class TransportError(RealmLookupError):
    """La petición HTTP falló antes de obtener un status (DNS, conexión, timeout)."""

    kind = "transport_error"

    def __init__(self, detail: str) -> None:
        super().__init__(f"HTTP request failed: {detail}")
        self.detail = detail


__all__ = [
    "RealmLookupError",
    "UnexpectedStatusError",
    "InvalidJsonError",
    "MalformedXmlError",
    "UnsupportedContentTypeError",
    "TransportError",
    "InvalidRequestError",
]
