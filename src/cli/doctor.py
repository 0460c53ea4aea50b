"""Doctor command for environment diagnostics."""

from __future__ import annotations

import typer
from rich.console import Console
from rich.table import Table

from core.config import AppSettings, get_user_env_file
from core.services.code_string import CodeString
from core.validation import EmailField, is_integer_string

_console = Console()

# (description, actual, expected)
_SELF_CHECKS = (
    ("camel of get-CPF", lambda: CodeString("get-CPF").camel, "getCPF"),
    ("pascal of foo-bar", lambda: CodeString("foo-bar").pascal, "FooBar"),
    ("constant of foo-bar", lambda: CodeString("foo-bar").constant, "FOO_BAR"),
    ("email john.doe@example.com", lambda: EmailField("john.doe@example.com").validate(), None),
    ("integer string 10e+1", lambda: is_integer_string("10e+1"), False),
)


def run_self_checks() -> list[tuple[str, bool, str]]:
    """Runs the documented examples and reports (check, ok, detail)."""

    results: list[tuple[str, bool, str]] = []
    for name, actual, expected in _SELF_CHECKS:
        value = actual()
        results.append((name, value == expected, repr(value)))
    return results


def run() -> None:
    """Show effective settings and run the built-in self-checks."""

    settings = AppSettings()

    table = Table(title="codekit doctor")
    table.add_column("Check", style="bright_green", no_wrap=True)
    table.add_column("Status", style="white")
    table.add_column("Details", style="dim")

    # Config
    env_file = get_user_env_file()
    table.add_row("User .env", "OK" if env_file.exists() else "OPTIONAL", str(env_file))
    table.add_row("Log level", "OK", settings.log_level)
    table.add_row("Banner", "OK", "on" if settings.show_banner else "off")
    table.add_row(
        "Charset default",
        "OK",
        "case-sensitive" if settings.charset_case_sensitive else "case-insensitive",
    )

    failed = 0
    for name, ok, detail in run_self_checks():
        table.add_row(name, "OK" if ok else "FAIL", detail)
        failed += 0 if ok else 1

    _console.print(table)

    if failed:
        _console.print(f"\n[red]{failed} self-check(s) failed.[/red]")
        raise typer.Exit(code=1)
