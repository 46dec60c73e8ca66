"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Permite exponer una vista tipada del realm sin perder el mapping original
  que devuelve el endpoint.

Nota:
- Estos modelos describen *qué* es la información, no *cómo* se obtiene.
"""

from __future__ import annotations

from typing import Any
from urllib.parse import quote, urlencode

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from core.domain.response_format import ResponseFormat

REALM_ENDPOINT = "https://login.microsoftonline.com/getuserrealm.srf"

# Local-part fijo: el caller solo aporta el dominio.
LOGIN_PREFIX = "username@"

REALM_FIELDS: tuple[str, ...] = (
    "State",
    "UserState",
    "Login",
    "NameSpaceType",
    "DomainName",
    "FederationGlobalVersion",
    "AuthURL",
    "IsFederatedNS",
    "STSAuthURL",
    "FederationTier",
    "FederationBrandName",
    "AllowFedUsersWLIDSignIn",
    "Certificate",
    "MEXURL",
    "PreferredProtocol",
    "EDUDomainFlags",
    "CloudInstanceName",
    "CloudInstanceIssuerUri",
    "AuthNForwardType",
)

# Campos que el esquema JSON codifica como números y el XML como texto.
NUMERIC_FIELDS: tuple[str, ...] = (
    "State",
    "UserState",
    "FederationGlobalVersion",
    "AuthNForwardType",
)

# El camino JSON no valida tipos: cualquier valor JSON pasa tal cual.
RealmValue = Any


class RealmRequest(BaseModel):
    """Descriptor de la petición a GetUserRealm (construcción pura, sin I/O)."""

    model_config = ConfigDict(frozen=True)

    domain: str = Field(
        ...,
        min_length=1,
        description="Dominio consultado; se envía tal cual, sin validar sintaxis DNS.",
    )
    response_format: ResponseFormat = Field(
        default=ResponseFormat.XML,
        description="Formato pedido al endpoint (xml/json).",
    )
    endpoint: str = Field(
        default=REALM_ENDPOINT,
        min_length=8,
        description="URL base del endpoint.",
    )
    method: str = Field(default="GET")

    @property
    def login(self) -> str:
        return f"{LOGIN_PREFIX}{self.domain}"

    @property
    def params(self) -> dict[str, str]:
        """Query en orden: `login` y después el flag de formato."""

        return {"login": self.login, self.response_format.query_flag: "1"}

    @property
    def login_param(self) -> str:
        """Valor de `login` tal y como viaja en la URL (percent-encoded)."""

        return quote(self.login, safe="")

    @property
    def url(self) -> str:
        return f"{self.endpoint}?{urlencode(self.params, quote_via=quote)}"


class RealmInfo(BaseModel):
    """Vista tipada del realm de un dominio.

    El mapping devuelto por el endpoint es la fuente de verdad: `to_mapping()`
    lo reproduce sin renombrar claves. Las claves desconocidas se conservan
    como extras.

    Campos numéricos (`State`, `UserState`, `FederationGlobalVersion`,
    `AuthNForwardType`):
    - origen JSON: llegan como enteros; `numeric()` devuelve `int`.
    - origen XML: llegan como texto; `numeric()` devuelve el string sin tocar.
    - `state`, `user_state`, `federation_global_version` y `authn_forward_type`
      son esa misma vista; el valor crudo queda en `raw_*`.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, frozen=True)

    raw_state: RealmValue = Field(default=None, alias="State")
    raw_user_state: RealmValue = Field(default=None, alias="UserState")
    login: RealmValue = Field(
        default=None,
        alias="Login",
        description="Eco del login enviado (`username@<dominio>`).",
    )
    name_space_type: RealmValue = Field(
        default=None,
        alias="NameSpaceType",
        description="Federated/Managed/Unknown u otro valor opaco del servicio.",
    )
    domain_name: RealmValue = Field(default=None, alias="DomainName")
    raw_federation_global_version: RealmValue = Field(default=None, alias="FederationGlobalVersion")
    auth_url: RealmValue = Field(default=None, alias="AuthURL")
    is_federated_ns: RealmValue = Field(default=None, alias="IsFederatedNS")
    sts_auth_url: RealmValue = Field(default=None, alias="STSAuthURL")
    federation_tier: RealmValue = Field(default=None, alias="FederationTier")
    federation_brand_name: RealmValue = Field(default=None, alias="FederationBrandName")
    allow_fed_users_wlid_sign_in: RealmValue = Field(default=None, alias="AllowFedUsersWLIDSignIn")
    certificate: RealmValue = Field(default=None, alias="Certificate")
    mex_url: RealmValue = Field(default=None, alias="MEXURL")
    preferred_protocol: RealmValue = Field(default=None, alias="PreferredProtocol")
    edu_domain_flags: RealmValue = Field(default=None, alias="EDUDomainFlags")
    cloud_instance_name: RealmValue = Field(default=None, alias="CloudInstanceName")
    cloud_instance_issuer_uri: RealmValue = Field(default=None, alias="CloudInstanceIssuerUri")
    raw_authn_forward_type: RealmValue = Field(default=None, alias="AuthNForwardType")

    source_format: ResponseFormat = Field(
        default=ResponseFormat.XML,
        exclude=True,
        description="Formato del que se decodificó el registro (no forma parte del mapping).",
    )

    @classmethod
    def from_mapping(
        cls,
        mapping: dict[str, Any],
        *,
        source_format: ResponseFormat,
    ) -> "RealmInfo":
        return cls.model_validate({**mapping, "source_format": source_format})

    def to_mapping(self) -> dict[str, Any]:
        """Mapping con las claves originales del endpoint."""

        return self.model_dump(by_alias=True, exclude_unset=True)

    def get(self, name: str, default: Any = None) -> Any:
        """Acceso por nombre de campo del endpoint (p.ej. `"NameSpaceType"`)."""

        return self.to_mapping().get(name, default)

    def numeric(self, name: str) -> int | str | None:
        """Vista tipada de un campo numérico, según el formato de origen."""

        if name not in NUMERIC_FIELDS:
            raise KeyError(f"{name} no es un campo numérico")

        value = self.get(name)
        if value is None or self.source_format is not ResponseFormat.JSON:
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return value
        # Algunos proxies serializan los números como texto.
        if isinstance(value, str):
            try:
                return int(value)
            except ValueError:
                return value
        return value

    @property
    def state(self) -> int | str | None:
        return self.numeric("State")

    @property
    def user_state(self) -> int | str | None:
        return self.numeric("UserState")

    @property
    def federation_global_version(self) -> int | str | None:
        return self.numeric("FederationGlobalVersion")

    @property
    def authn_forward_type(self) -> int | str | None:
        return self.numeric("AuthNForwardType")

    @property
    def is_federated(self) -> bool:
        return self.name_space_type == "Federated"


class FailureEvent(BaseModel):
    """Evento de diagnóstico emitido antes de propagar un error."""

    kind: str = Field(
        ...,
        min_length=1,
        description="Tipo de error (unexpected_status, invalid_json, ...).",
    )
    domain: str | None = Field(default=None, description="Dominio consultado, si se conoce.")
    status_code: int | None = Field(default=None)
    content_type: str | None = Field(default=None)
    detail: str = Field(default="", description="Detalle legible del fallo.")
