"""Componentes de UI para CLI (Rich).

Por qué separar componentes:
- Evita mezclar lógica de comandos con detalles visuales.
- Permite reutilizar tablas/paneles en múltiples comandos.
"""

from __future__ import annotations

from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from core.domain.models import REALM_FIELDS, RealmInfo


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se omite en modos no interactivos (`--json`) para no ensuciar la salida.
    """

    title = Text("REALM-OSINT", style="bold cyan")
    subtitle = Text("GetUserRealm • Federación • Autenticación de dominios", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_realm_table(domain: str, realm: RealmInfo) -> Table:
    """Tabla campo/valor; los campos vacíos o ausentes no se muestran."""

    style = "green" if realm.is_federated else "yellow"
    table = Table(title=f"Realm: {domain} ({realm.source_format.label()})")
    table.add_column("Field", style="cyan", no_wrap=True)
    table.add_column("Value", style="white")

    mapping = realm.to_mapping()
    known = [name for name in REALM_FIELDS if name in mapping]
    extras = sorted(name for name in mapping if name not in REALM_FIELDS)
    for name in known + extras:
        value = mapping[name]
        if value is None or value == "":
            continue
        if name == "NameSpaceType":
            table.add_row(name, Text(str(value), style=f"bold {style}"))
        else:
            table.add_row(name, str(value))
    return table
