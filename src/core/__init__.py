"""Core de codekit: dominio, servicios y validación (sin I/O)."""
