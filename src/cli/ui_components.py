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

from core.domain.case_style import CaseStyle
from core.domain.models import CaseStyles, ValidationReport


def print_banner(console: Console) -> None:
    """Imprime el banner de bienvenida.

    Se desactiva con `CODEKIT_SHOW_BANNER=false` o en modo `--json`.
    """

    title = Text("codekit", style="bold cyan")
    subtitle = Text("Nomenclaturas • Validación de campos", style="dim")
    body = Align.center(Text.assemble(title, "\n", subtitle), vertical="middle")
    console.print(Panel(body, border_style="cyan", padding=(1, 4)))


def build_styles_table(identifier: str, styles: CaseStyles) -> Table:
    """Tabla con las cinco nomenclaturas de `identifier`."""

    table = Table(title=f"Case styles for {identifier!r}")
    table.add_column("Style", style="cyan", no_wrap=True)
    table.add_column("Convention", style="dim")
    table.add_column("Value", style="white")

    for style in CaseStyle:
        table.add_row(style.value, style.label(), getattr(styles, style.value))
    return table


def build_validation_panel(report: ValidationReport) -> Panel:
    """Panel para presentar un `ValidationReport`."""

    body = Text()
    body.append("Value: ", style="bold")
    body.append(f"{report.value!r}\n")
    if report.valid:
        body.append("Valid", style="bold green")
        border = "green"
    else:
        body.append("Invalid: ", style="bold red")
        body.append(report.message or "")
        border = "red"

    return Panel(body, title=Text(report.field, style="bold"), border_style=border)
