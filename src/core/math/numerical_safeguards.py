"""
Numerical Safeguards — проверки конечности элементов

Модуль обеспечивает численную проверку значений, попадающих в контейнеры:
- Проверка конечности для float, complex и Decimal
- Epsilon-сравнение float результатов редукций

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Типы без понятия NaN/Inf (int, Fraction, произвольные T) всегда конечны
2. Проверки не изменяют значения и не имеют побочных эффектов
"""

import cmath
import math
from decimal import Decimal
from typing import Any, Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Относительная толерантность для сравнения float
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Абсолютная толерантность для сравнения float
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_finite_element(value: Any) -> bool:
    """
    Проверка, является ли элемент конечным (не NaN, не Inf).

    Args:
        value: Проверяемое значение любого типа

    Returns:
        False только для NaN/Inf float, complex или Decimal; иначе True

    Examples:
        >>> is_finite_element(1.5)
        True
        >>> is_finite_element(float('nan'))
        False
        >>> is_finite_element(complex(1, float('inf')))
        False
        >>> is_finite_element(10**400)
        True
    """
    # bool и int проверяются раньше float: int не переполняется
    if isinstance(value, int):
        return True
    if isinstance(value, float):
        return math.isfinite(value)
    if isinstance(value, complex):
        return cmath.isfinite(value)
    if isinstance(value, Decimal):
        return value.is_finite()
    return True


# =============================================================================
# EPSILON-СРАВНЕНИЯ FLOAT
# =============================================================================


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Результат summary()/multiply() по float зависит от порядка свёртки,
    поэтому сравнивать его с эталоном нужно через толерантность.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(0.1 + 0.2, 0.3)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
