"""Consulta de realm de punta a punta.

Un ciclo petición/respuesta por llamada, sin estado compartido:
1. `build_request` arma la query (`login=username@<dominio>` + formato).
2. httpx la envía (cliente propio con el timeout de la config, o inyectado).
3. `normalize_response` convierte la respuesta en el mapping canónico.

Cada fallo emite un `FailureEvent` al `DiagnosticsSink` antes de propagarse.
No hay reintentos: quien necesite resiliencia envuelve la llamada.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx
from pydantic import ValidationError

from adapters.http_client import build_async_client, build_client
from adapters.logging_diagnostics import LoggingDiagnostics
from core.config import AppSettings
from core.domain.models import RealmInfo, RealmRequest
from core.domain.response_format import ResponseFormat
from core.errors import InvalidRequestError, TransportError
from core.interfaces.diagnostics import DiagnosticsSink
from core.services.realm_normalizer import (
    RawResponse,
    failure_event,
    normalize_response,
    source_format,
)
from core.services.realm_request import build_request

log = logging.getLogger(__name__)


def get_realm(
    domain: str,
    response_format: ResponseFormat | str | None = None,
    *,
    client: httpx.Client | None = None,
    settings: AppSettings | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> dict[str, Any]:
    """Devuelve el realm de `domain` como mapping `campo -> valor`.

    Lanza `RealmLookupError` (o subclase) si la consulta falla. Si se inyecta
    `client`, su ciclo de vida es del caller.
    """

    realm, _ = _lookup(domain, response_format, client, settings, diagnostics)
    return realm


def lookup_realm(
    domain: str,
    response_format: ResponseFormat | str | None = None,
    *,
    client: httpx.Client | None = None,
    settings: AppSettings | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> RealmInfo:
    """Igual que `get_realm` pero devuelve la vista tipada `RealmInfo`."""

    realm, fmt = _lookup(domain, response_format, client, settings, diagnostics)
    return RealmInfo.from_mapping(realm, source_format=fmt)


async def get_realm_async(
    domain: str,
    response_format: ResponseFormat | str | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    settings: AppSettings | None = None,
    diagnostics: DiagnosticsSink | None = None,
) -> dict[str, Any]:
    """Variante asyncio de `get_realm` sobre `httpx.AsyncClient`."""

    settings = settings or AppSettings()
    diagnostics = diagnostics or LoggingDiagnostics()
    request = _build_request(domain, response_format, settings, diagnostics)

    owns_client = client is None
    http = client or build_async_client(settings)
    try:
        log.debug("GET %s", request.url)
        try:
            response = await http.request(request.method, request.endpoint, params=request.params)
        except httpx.RequestError as exc:
            raise _transport_error(request, exc, diagnostics) from exc
    finally:
        if owns_client:
            await http.aclose()

    raw = _raw_response(response)
    realm = normalize_response(raw, diagnostics=diagnostics, domain=request.domain)
    _check_login_echo(request, realm)
    return realm


def _lookup(
    domain: str,
    response_format: ResponseFormat | str | None,
    client: httpx.Client | None,
    settings: AppSettings | None,
    diagnostics: DiagnosticsSink | None,
) -> tuple[dict[str, Any], ResponseFormat]:
    settings = settings or AppSettings()
    diagnostics = diagnostics or LoggingDiagnostics()
    request = _build_request(domain, response_format, settings, diagnostics)

    owns_client = client is None
    http = client or build_client(settings)
    try:
        log.debug("GET %s", request.url)
        try:
            response = http.request(request.method, request.endpoint, params=request.params)
        except httpx.RequestError as exc:
            raise _transport_error(request, exc, diagnostics) from exc
    finally:
        if owns_client:
            http.close()

    raw = _raw_response(response)
    realm = normalize_response(raw, diagnostics=diagnostics, domain=request.domain)
    _check_login_echo(request, realm)
    return realm, source_format(raw)


def _build_request(
    domain: str,
    response_format: ResponseFormat | str | None,
    settings: AppSettings,
    diagnostics: DiagnosticsSink,
) -> RealmRequest:
    try:
        return build_request(domain, response_format, settings=settings)
    except ValueError as exc:
        reason = exc.errors()[0]["msg"] if isinstance(exc, ValidationError) else str(exc)
        error = InvalidRequestError(f"Invalid request for domain {domain!r}: {reason}")
        diagnostics.emit(failure_event(error, domain=domain or None))
        raise error from exc


def _raw_response(response: httpx.Response) -> RawResponse:
    log.debug(
        "GetUserRealm responded %s (%s)",
        response.status_code,
        response.headers.get("content-type"),
    )
    return RawResponse(
        status_code=response.status_code,
        content_type=response.headers.get("content-type"),
        body=response.content,
    )


def _transport_error(
    request: RealmRequest,
    exc: httpx.RequestError,
    diagnostics: DiagnosticsSink,
) -> TransportError:
    error = TransportError(f"{type(exc).__name__}: {exc}")
    diagnostics.emit(failure_event(error, domain=request.domain))
    return error


def _check_login_echo(request: RealmRequest, realm: dict[str, Any]) -> None:
    echoed = realm.get("Login")
    if not isinstance(echoed, str) or not echoed:
        return
    if echoed.casefold() != request.login.casefold():
        log.warning("Login echo mismatch: sent %r, received %r", request.login, echoed)
