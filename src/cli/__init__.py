"""CLI de codekit (Typer + Rich)."""
