"""buoysim.core.units

Единицы измерения модели (система СГС).

Принцип: везде, где есть числа, должна быть явная единица (например, 20 * CENTIMETRE).
Модель считает в см/г/с, поэтому сила в динах, давление в бариях (дин/см²).
"""

from __future__ import annotations

# Base units (CGS)
CENTIMETRE: float = 1.0
GRAM: float = 1.0
SECOND: float = 1.0

# Derived units
DYNE: float = GRAM * CENTIMETRE / (SECOND**2)
BARYE: float = DYNE / (CENTIMETRE**2)  # dyn/cm^2
CUBIC_CENTIMETRE: float = CENTIMETRE**3

# Useful constants
G_CGS: float = 981.0 * CENTIMETRE / (SECOND**2)
WATER_DENSITY: float = 1.0 * GRAM / CUBIC_CENTIMETRE

# SI conversion
NEWTON_PER_DYNE: float = 1e-5
PASCAL_PER_BARYE: float = 0.1


def dyne_to_newton(force_dyn: float) -> float:
    return float(force_dyn) * NEWTON_PER_DYNE


def barye_to_pascal(pressure_ba: float) -> float:
    return float(pressure_ba) * PASCAL_PER_BARYE
