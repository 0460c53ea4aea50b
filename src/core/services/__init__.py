"""Servicios del Core (lógica pura, sin I/O)."""

from core.services.code_string import CodeString

__all__ = ["CodeString"]
