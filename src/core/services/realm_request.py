"""Construcción de la consulta a GetUserRealm."""

from __future__ import annotations

from core.config import AppSettings
from core.domain.models import RealmRequest
from core.domain.response_format import ResponseFormat


def build_request(
    domain: str,
    response_format: ResponseFormat | str | None = None,
    *,
    settings: AppSettings | None = None,
) -> RealmRequest:
    """Crea el `RealmRequest` para `domain`.

    - Sin formato explícito se usa `settings.default_format` (xml por defecto).
    - El dominio no se valida más allá de no estar vacío: si es inválido, el
      error del endpoint se devuelve tal cual.
    """

    settings = settings or AppSettings()
    fmt = response_format or settings.default_format
    return RealmRequest(
        domain=domain,
        response_format=ResponseFormat(fmt.lower()),
        endpoint=settings.endpoint_url,
    )
