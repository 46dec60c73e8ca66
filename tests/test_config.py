# tests/test_config.py
from __future__ import annotations

import sys

import pytest
from pydantic import ValidationError

from core.config import AppSettings, get_user_env_file, write_user_env_vars
from core.domain.models import REALM_ENDPOINT
from core.domain.response_format import ResponseFormat


def test_defaults(settings):
    assert settings.http_timeout_seconds == 20.0
    assert settings.default_format is ResponseFormat.XML
    assert settings.endpoint_url == REALM_ENDPOINT
    assert settings.user_agent


def test_env_prefix_overrides(monkeypatch):
    monkeypatch.setenv("REALM_OSINT_DEFAULT_FORMAT", "json")
    monkeypatch.setenv("REALM_OSINT_HTTP_TIMEOUT_SECONDS", "3.5")

    s = AppSettings(_env_file=None)

    assert s.default_format is ResponseFormat.JSON
    assert s.http_timeout_seconds == 3.5


def test_invalid_timeout_rejected(monkeypatch):
    monkeypatch.setenv("REALM_OSINT_HTTP_TIMEOUT_SECONDS", "0")

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_dotenv_in_working_directory_is_read(tmp_path):
    # conftest chdirs into tmp_path
    (tmp_path / ".env").write_text("REALM_OSINT_DEFAULT_FORMAT=json\n", encoding="utf-8")

    assert AppSettings(_env_file=".env").default_format is ResponseFormat.JSON


@pytest.mark.skipif(sys.platform in ("win32", "darwin"), reason="XDG only applies on linux")
def test_user_env_file_follows_xdg(tmp_path):
    assert get_user_env_file() == tmp_path / "xdg" / "realm-osint" / ".env"


def test_write_user_env_vars_merges_and_sorts():
    path = write_user_env_vars({"REALM_OSINT_DEFAULT_FORMAT": "json"})
    write_user_env_vars({"REALM_OSINT_HTTP_TIMEOUT_SECONDS": "5"})

    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0].startswith("#")
    assert lines[1:] == [
        "REALM_OSINT_DEFAULT_FORMAT=json",
        "REALM_OSINT_HTTP_TIMEOUT_SECONDS=5",
    ]
    assert AppSettings(_env_file=path).default_format is ResponseFormat.JSON
