"""
Numerical Safeguards — Safe Math Primitives для построения диаграмм

Модуль обеспечивает численную устойчивость вычислений над кривыми:
- Проверка float на конечность (NaN/Inf не пропагируют в оси графика)
- Epsilon-сравнения с учётом машинной точности
- Округление вверх с допуском в несколько ulp на шум представления float
- Ограничение значений и валидация параметров

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Float сравнения всегда учитывают машинную точность
2. ceil_with_tolerance(55.00000000000001) == 55, а не 56
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное, False если NaN или Inf
    """
    return math.isfinite(value)


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

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)


# Допуск шума представления float для ceil_with_tolerance (в ulp)
CEIL_NOISE_ULPS: Final[int] = 4


def ceil_with_tolerance(
    value: float,
    noise_ulps: int = CEIL_NOISE_ULPS,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> int:
    """
    Округление вверх до целого с толерантностью к шуму float.

    Произведение вроде 50 * 1.1 даёт 55.00000000000001; обычный math.ceil
    вернул бы 56. Значение притягивается к ближайшему целому, только если
    отстоит от него не более чем на noise_ulps * ulp(value) (или abs_tol).

    Args:
        value: Конечное значение
        noise_ulps: Допуск шума в единицах ulp(value)
        abs_tol: Абсолютная толерантность (для значений около нуля)

    Returns:
        Наименьшее целое >= value (с учётом шума представления)

    Raises:
        ValueError: Если value NaN/Inf

    Examples:
        >>> ceil_with_tolerance(50 * 1.1)
        55
        >>> ceil_with_tolerance(55.2)
        56
        >>> ceil_with_tolerance(1_000_000_000.4)
        1000000001
    """
    if not is_valid_float(value):
        raise ValueError(f"value must be a valid float (not NaN/Inf), got {value}")

    nearest = round(value)
    if abs(value - nearest) <= max(noise_ulps * math.ulp(value), abs_tol):
        return int(nearest)
    return math.ceil(value)


# =============================================================================
# УТИЛИТЫ
# =============================================================================


def clamp(
    value: float,
    min_value: float | None = None,
    max_value: float | None = None,
) -> float:
    """
    Ограничение значения в заданном диапазоне.

    Examples:
        >>> clamp(5.0, 0.0, 10.0)
        5.0
        >>> clamp(-1.0, 0.0)
        0.0
        >>> clamp(15.0, max_value=10.0)
        10.0
    """
    result = value

    if min_value is not None:
        result = max(result, min_value)

    if max_value is not None:
        result = min(result, max_value)

    return result


# =============================================================================
# ВАЛИДАЦИЯ
# =============================================================================


def validate_non_negative(value: float, name: str) -> None:
    """
    Валидация, что значение конечное и неотрицательное.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value < 0 или NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")

    if value < 0:
        raise ValueError(f"{name} must be non-negative, got {value}")
