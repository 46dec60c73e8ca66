"""Exportación JSON de un realm.

Por qué JSON:
- Interoperabilidad con otras herramientas OSINT y pipelines.
- Permite guardar la evidencia cruda sin depender de la salida de terminal.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any


def export_realm_json(
    *,
    domain: str,
    realm: dict[str, Any],
    output_path: Path,
) -> Path:
    """Exporta `{"domain", "realm"}` a JSON UTF-8 con formato estable."""

    output_path.parent.mkdir(parents=True, exist_ok=True)
    payload = {"domain": domain, "realm": realm}
    output_path.write_text(
        json.dumps(payload, ensure_ascii=False, indent=2, sort_keys=True) + "\n",
        encoding="utf-8",
    )
    return output_path
