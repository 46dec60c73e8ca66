# tests/conftest.py
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure src/ importable without an editable install
SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from core.config import AppSettings  # noqa: E402
from core.domain.models import FailureEvent  # noqa: E402

REALM_HOST = "login.microsoftonline.com"
REALM_PATH = "/getuserrealm.srf"

# Federated domain sample (JSON schema, numbers as numbers).
FEDERATED_JSON: dict[str, object] = {
    "State": 3,
    "UserState": 2,
    "Login": "username@example.com",
    "NameSpaceType": "Federated",
    "DomainName": "example.com",
    "FederationGlobalVersion": -1,
    "AuthURL": (
        "https://sts.example.com/adfs/ls/?username=username%40example.com"
        "&wa=wsignin1.0&wtrealm=urn%3afederation%3aMicrosoftOnline&wctx="
    ),
    "FederationBrandName": "Example Corp",
    "AuthNForwardType": 1,
    "CloudInstanceName": "microsoftonline.com",
    "CloudInstanceIssuerUri": "urn:federation:MicrosoftOnline",
}

UNKNOWN_JSON: dict[str, object] = {
    "State": 4,
    "UserState": 1,
    "Login": "username@unknownplace.test",
    "NameSpaceType": "Unknown",
}

# All nineteen fields with known values (XML schema, everything is text).
FULL_XML_VALUES: dict[str, str] = {
    "State": "3",
    "UserState": "2",
    "Login": "username@example.com",
    "NameSpaceType": "Federated",
    "DomainName": "example.com",
    "FederationGlobalVersion": "-1",
    "AuthURL": "https://sts.example.com/adfs/ls/?username=username%40example.com&wa=wsignin1.0",
    "IsFederatedNS": "true",
    "STSAuthURL": "https://sts.example.com/adfs/services/trust/2005/usernamemixed",
    "FederationTier": "0",
    "FederationBrandName": "Example Corp",
    "AllowFedUsersWLIDSignIn": "false",
    "Certificate": "MIIC2DCCAcCgAwIBAgIQ",
    "MEXURL": "https://sts.example.com/adfs/services/trust/mex",
    "PreferredProtocol": "1",
    "EDUDomainFlags": "0",
    "CloudInstanceName": "microsoftonline.com",
    "CloudInstanceIssuerUri": "urn:federation:MicrosoftOnline",
    "AuthNForwardType": "1",
}


def realm_xml(values: dict[str, str], *, declaration: bool = True) -> bytes:
    """Build a GetUserRealm-style XML document from `values` (escaped)."""
    from xml.sax.saxutils import escape

    children = "".join(f"<{k}>{escape(v)}</{k}>" for k, v in values.items())
    head = '<?xml version="1.0" encoding="utf-8"?>' if declaration else ""
    return f'{head}<RealmInfo Success="true">{children}</RealmInfo>'.encode("utf-8")


class RecordingDiagnostics:
    """DiagnosticsSink that keeps events in memory."""

    def __init__(self) -> None:
        self.events: list[FailureEvent] = []

    def emit(self, event: FailureEvent) -> None:
        self.events.append(event)


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # no REALM_OSINT_* leaking from the developer shell; user .env goes to tmp
    import os

    for key in list(os.environ):
        if key.upper().startswith("REALM_OSINT_"):
            monkeypatch.delenv(key, raising=False)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def settings() -> AppSettings:
    return AppSettings(_env_file=None)


@pytest.fixture
def diagnostics() -> RecordingDiagnostics:
    return RecordingDiagnostics()
