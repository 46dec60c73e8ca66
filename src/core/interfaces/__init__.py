"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) que implementan adaptadores concretos.
- El Core emite diagnósticos contra `DiagnosticsSink`, no contra `logging`.
"""

from core.interfaces.diagnostics import DiagnosticsSink

__all__ = ["DiagnosticsSink"]
