"""Wrapper de httpx.

Por qué un wrapper:
- Estandariza timeouts, headers y redirects para el cliente sync y el async.
- Facilita testeo: se puede sustituir por un cliente inyectado o mockeado.
"""

from __future__ import annotations

import httpx

from core.config import AppSettings

_ACCEPT = "application/json, text/xml;q=0.9, */*;q=0.8"


def _default_headers(settings: AppSettings) -> dict[str, str]:
    return {
        "User-Agent": settings.user_agent,
        "Accept": _ACCEPT,
    }


def build_client(settings: AppSettings | None = None) -> httpx.Client:
    """Crea un `httpx.Client` con defaults seguros (timeout de la config)."""

    settings = settings or AppSettings()
    return httpx.Client(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(settings),
    )


def build_async_client(settings: AppSettings | None = None) -> httpx.AsyncClient:
    """Equivalente async de `build_client`."""

    settings = settings or AppSettings()
    return httpx.AsyncClient(
        timeout=httpx.Timeout(settings.http_timeout_seconds),
        follow_redirects=True,
        headers=_default_headers(settings),
    )
