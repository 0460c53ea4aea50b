"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan los campos de validación.
- Permite que la CLI dependa de abstracciones y no de clases concretas.
"""
