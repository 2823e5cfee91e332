"""buoysim.core.validation

Базовые проверки, чтобы ловить физически невозможные значения как можно раньше.
Ошибка одна: InvalidInput (наследник ValueError), с полем и значением.
"""

from __future__ import annotations

import math


class InvalidInput(ValueError):
    """Параметр объекта нарушает ограничение (объём/плотность/глубина)."""

    def __init__(self, field: str, value: float, constraint: str) -> None:
        self.field = field
        self.value = value
        self.constraint = constraint
        super().__init__(f"{field} must be {constraint}, got {value}")


def ensure_finite(value: float, name: str) -> None:
    if not math.isfinite(float(value)):
        raise InvalidInput(name, value, "finite")


def ensure_non_negative(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value < 0:
        raise InvalidInput(name, value, ">= 0")


def ensure_positive(value: float, name: str) -> None:
    ensure_finite(value, name)
    if value <= 0:
        raise InvalidInput(name, value, "> 0")
