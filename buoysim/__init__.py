"""buoysim package.

Важно: пакет не должен иметь побочных эффектов при импорте
(никакого matplotlib/pandas на верхнем уровне).

Импортируй нужное напрямую:
- from buoysim.physics import evaluate, explain
- from buoysim.core.types import SubmergedObject
"""

from __future__ import annotations

__version__ = "0.1.0"

__all__: list[str] = []
