"""CLI de codekit (Typer + Rich).

Por qué una CLI fina:
- Toda la lógica vive en `core/`; aquí solo se leen argumentos, se llama al
  Core y se presenta el resultado (tabla Rich o JSON).
"""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

import typer
from rich.console import Console

from cli import doctor
from cli.ui_components import build_styles_table, build_validation_panel, print_banner
from core.config import AppSettings
from core.domain.case_style import CaseStyle
from core.domain.models import ValidationReport
from core.interfaces.validation import Validatable
from core.logging_setup import configure_logging
from core.services.code_string import CodeString
from core.validation import CharsetField, CodeField, EmailField, IntegerStringField

logger = logging.getLogger(__name__)

app = typer.Typer(no_args_is_help=True, help="Identifier case conversion and field validation.")
validate_app = typer.Typer(no_args_is_help=True, help="Validate a value with a built-in field.")
app.add_typer(validate_app, name="validate")
app.command(name="doctor")(doctor.run)

_console = Console()


def _package_version() -> str:
    try:
        return version("codekit")
    except PackageNotFoundError:
        return "0.0.0+local"


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"codekit {_package_version()}")
        raise typer.Exit()


@app.callback()
def main(
    version_: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
) -> None:
    settings = AppSettings()
    configure_logging(settings.log_level)


@app.command()
def case(
    identifier: str = typer.Argument(..., help="Identifier in dash-case (e.g. get-CPF)."),
    style: str | None = typer.Option(
        None,
        "--style",
        "-s",
        help=f"Print a single style: {', '.join(CaseStyle.names())}.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print all styles as JSON."),
) -> None:
    """Convert a dash-case identifier to every supported case style."""

    code = CodeString(identifier)

    if style is not None:
        try:
            selected = CaseStyle(style.strip().lower())
        except ValueError:
            raise typer.BadParameter(
                f"unknown style {style!r}; expected one of: {', '.join(CaseStyle.names())}",
                param_hint="--style",
            ) from None
        typer.echo(code.get(selected))
        return

    styles = code.export_all()
    if as_json:
        typer.echo(styles.model_dump_json(indent=2))
        return

    if AppSettings().show_banner:
        print_banner(_console)
    _console.print(build_styles_table(identifier, styles))


def _report(name: str, value: str, field: Validatable, as_json: bool) -> None:
    report = ValidationReport.from_outcome(field=name, value=value, outcome=field.validate())
    logger.info("validate %s %r -> %s", name, value, "valid" if report.valid else "invalid")

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    else:
        _console.print(build_validation_panel(report))

    if not report.valid:
        raise typer.Exit(code=1)


_JSON_OPTION = typer.Option(False, "--json", help="Print the validation report as JSON.")


@validate_app.command("email")
def validate_email(
    value: str = typer.Argument(..., help="Email address to check."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Check an address against the ASCII email grammar."""

    _report("email", value, EmailField(value), as_json)


@validate_app.command("integer")
def validate_integer(
    value: str = typer.Argument(..., help="Value that must contain only digits."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Check that a value is made only of the digits 0-9."""

    _report("integer", value, IntegerStringField(value), as_json)


@validate_app.command("charset")
def validate_charset(
    value: str = typer.Argument(..., help="Value to scan."),
    charset: str = typer.Option(..., "--charset", "-c", help="Allowed characters."),
    ignore_case: bool = typer.Option(
        False,
        "--ignore-case",
        "-i",
        help="Compare case-insensitively (also enabled by CODEKIT_CHARSET_CASE_SENSITIVE=false).",
    ),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Check that every character of a value belongs to a charset."""

    case_sensitive = AppSettings().charset_case_sensitive and not ignore_case

    field = CharsetField(value, charset=charset, case_sensitive=case_sensitive)
    _report("charset", value, field, as_json)


@validate_app.command("code")
def validate_code(
    value: str = typer.Argument(..., help="Code to check."),
    length: int = typer.Option(4, "--length", "-l", min=1, help="Expected length."),
    as_json: bool = _JSON_OPTION,
) -> None:
    """Check that a code has the expected length (surrounding spaces ignored)."""

    _report("code", value, CodeField(value, length=length), as_json)


def run() -> None:
    app()
