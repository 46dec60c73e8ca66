"""Contrato del colaborador de diagnósticos.

Por qué Protocol:
- El Core emite eventos de fallo sin depender de un logger global.
- En tests basta con una clase que acumule eventos en una lista.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.models import FailureEvent


@runtime_checkable
class DiagnosticsSink(Protocol):
    """Recibe un evento por cada fallo, antes de propagar el error.

    Reglas de diseño:
    - Solo observabilidad: no puede alterar el resultado ni el flujo.
    """

    def emit(self, event: FailureEvent) -> None:
        ...
