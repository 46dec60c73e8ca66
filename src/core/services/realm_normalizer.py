"""Normalización de respuestas de GetUserRealm.

El endpoint devuelve dos esquemas:
- JSON (`json=1`): objeto plano; los campos numéricos llegan como números.
- XML (`xml=1`): documento `<RealmInfo>` con un hijo por campo, todo texto.

Ambos terminan en el mismo mapping `campo -> valor`. El camino JSON no renombra
ni convierte nada; el XML rellena con `""` los campos ausentes.
"""

from __future__ import annotations

import json
import xml.etree.ElementTree as ET
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from core.domain.models import REALM_FIELDS, FailureEvent
from core.domain.response_format import ResponseFormat
from core.errors import (
    InvalidJsonError,
    MalformedXmlError,
    RealmLookupError,
    UnexpectedStatusError,
    UnsupportedContentTypeError,
)
from core.interfaces.diagnostics import DiagnosticsSink

_JSON_TYPES = ("application/json",)
_XML_TYPES = ("text/xml", "application/xml")


@dataclass(frozen=True)
class RawResponse:
    """Respuesta HTTP tal como la entrega el cliente.

    `body` puede ser bytes, str o un objeto ya decodificado (clientes que
    parsean JSON automáticamente).
    """

    status_code: int
    content_type: str | None
    body: Any


def media_type(content_type: str | None) -> str:
    """`"text/xml; charset=utf-8"` -> `"text/xml"`."""

    return (content_type or "").split(";", 1)[0].strip().lower()


def source_format(response: RawResponse) -> ResponseFormat:
    """Esquema del que sale el mapping (misma regla que el despacho)."""

    ctype = media_type(response.content_type)
    if ctype.startswith(_XML_TYPES) or (not ctype and _looks_like_xml(response.body)):
        return ResponseFormat.XML
    return ResponseFormat.JSON


def failure_event(
    exc: RealmLookupError,
    *,
    domain: str | None = None,
    status_code: int | None = None,
    content_type: str | None = None,
) -> FailureEvent:
    return FailureEvent(
        kind=exc.kind,
        domain=domain,
        status_code=getattr(exc, "status_code", status_code),
        content_type=content_type,
        detail=str(exc),
    )


def normalize_response(
    response: RawResponse,
    *,
    diagnostics: DiagnosticsSink | None = None,
    domain: str | None = None,
) -> dict[str, Any]:
    """Convierte `response` en el mapping canónico del realm.

    Lanza una subclase de `RealmLookupError`; si hay `diagnostics`, el evento
    de fallo se emite antes de propagar.
    """

    try:
        return _normalize(response)
    except RealmLookupError as exc:
        if diagnostics is not None:
            diagnostics.emit(
                failure_event(
                    exc,
                    domain=domain,
                    status_code=response.status_code,
                    content_type=response.content_type,
                )
            )
        raise


def _normalize(response: RawResponse) -> dict[str, Any]:
    if response.status_code != 200:
        raise UnexpectedStatusError(response.status_code)

    ctype = media_type(response.content_type)
    body = response.body

    if ctype.startswith(_JSON_TYPES):
        return decode_json(body)
    if source_format(response) is ResponseFormat.XML:
        return parse_xml(body)

    # Content-type no reconocido: objeto ya decodificado, o intento JSON.
    if isinstance(body, Mapping):
        return body  # type: ignore[return-value]
    try:
        return decode_json(body)
    except InvalidJsonError as exc:
        raise UnsupportedContentTypeError(response.content_type) from exc


def decode_json(body: Any) -> dict[str, Any]:
    """Devuelve el objeto JSON; un mapping ya decodificado pasa sin tocar."""

    if isinstance(body, Mapping):
        return body  # type: ignore[return-value]
    if not isinstance(body, (str, bytes, bytearray)):
        raise InvalidJsonError(f"Unexpected JSON body type: {type(body).__name__}")

    try:
        data = json.loads(body)
    except ValueError as exc:
        raise InvalidJsonError(f"Invalid JSON body: {exc}") from exc

    if not isinstance(data, dict):
        raise InvalidJsonError(f"JSON body is not an object: {type(data).__name__}")
    return data


def parse_xml(body: Any) -> dict[str, str]:
    """Extrae `/RealmInfo/<Campo>` para cada campo conocido.

    Campo ausente -> `""`. Sin conversión numérica.
    """

    if isinstance(body, bytearray):
        body = bytes(body)
    if not isinstance(body, (str, bytes)):
        raise MalformedXmlError(f"Unexpected XML body type: {type(body).__name__}")

    try:
        root = ET.fromstring(_strip_leading(body))
    except ET.ParseError as exc:
        raise MalformedXmlError(f"Invalid XML document: {exc}") from exc

    if root.tag != "RealmInfo":
        raise MalformedXmlError(f"Unexpected root element: {root.tag!r}")

    return {field: _child_text(root, field) for field in REALM_FIELDS}


def _child_text(root: ET.Element, field: str) -> str:
    element = root.find(field)
    if element is None or element.text is None:
        return ""
    return element.text


def _strip_leading(body: str | bytes) -> str | bytes:
    # expat exige la declaración XML al inicio exacto del documento
    if isinstance(body, str):
        return body.lstrip("\ufeff \t\r\n")
    return body.lstrip(b"\xef\xbb\xbf \t\r\n")


def _looks_like_xml(body: Any) -> bool:
    if isinstance(body, bytearray):
        body = bytes(body)
    if isinstance(body, (str, bytes)):
        return _strip_leading(body)[:1] in ("<", b"<")
    return False
