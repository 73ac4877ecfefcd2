"""
RangeCalibrator — Автоматическая граница оси количества

Граница оси Q по умолчанию выводится из точки пересечения кривой спроса
с осью Q (цена = 0):

    q0 = |-intercept / slope|
    bound = ceil(q0 * buffer_ratio)

Знак q0 отбрасывается: спрос с положительным наклоном тоже получает границу.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Функция тотальна: никаких исключений ни при каком входе
2. Ошибка разбора, нулевой наклон, NaN/Inf, нулевой результат → fallback
3. Результат явно помечен источником (INTERCEPT / FALLBACK) и причиной
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from src.core.domain.curve import LinearFunction
from src.core.math.numerical_safeguards import ceil_with_tolerance, is_valid_float
from src.diagram.formula_parser import FormulaSyntaxError, parse_formula
from src.diagram.settings import DEFAULT_BUFFER_RATIO, DEFAULT_FALLBACK_BOUND

logger = logging.getLogger(__name__)


# =============================================================================
# ТИПЫ
# =============================================================================


class CalibrationSource(str, Enum):
    """Откуда взята граница."""

    INTERCEPT = "INTERCEPT"
    FALLBACK = "FALLBACK"


class FallbackReason(str, Enum):
    """Почему использован fallback."""

    PARSE_ERROR = "PARSE_ERROR"
    ZERO_SLOPE = "ZERO_SLOPE"
    NON_FINITE = "NON_FINITE"
    ZERO_BOUND = "ZERO_BOUND"


@dataclass(frozen=True)
class CalibrationResult:
    """Результат калибровки оси Q."""

    bound: float
    source: CalibrationSource
    reason: Optional[FallbackReason] = None

    @property
    def is_fallback(self) -> bool:
        return self.source == CalibrationSource.FALLBACK


# =============================================================================
# КАЛИБРОВКА
# =============================================================================


def _fallback(reason: FallbackReason, fallback: float, detail: str) -> CalibrationResult:
    logger.debug("Range calibration fell back to %s (%s): %s", fallback, reason.value, detail)
    return CalibrationResult(bound=fallback, source=CalibrationSource.FALLBACK, reason=reason)


def calibrate_range(
    demand: Union[LinearFunction, str],
    buffer_ratio: float = DEFAULT_BUFFER_RATIO,
    fallback: float = DEFAULT_FALLBACK_BOUND,
) -> CalibrationResult:
    """
    Граница оси Q по кривой спроса.

    Args:
        demand: Функция спроса или текст формулы спроса
        buffer_ratio: Множитель запаса сверх q0 (default: 1.1)
        fallback: Граница при невозможности расчёта (default: 50.0)

    Returns:
        CalibrationResult; никогда не бросает исключений

    Examples:
        >>> calibrate_range("-1*Q+50").bound
        55.0
        >>> calibrate_range("0*Q+50").reason
        <FallbackReason.ZERO_SLOPE: 'ZERO_SLOPE'>
    """
    if isinstance(demand, LinearFunction):
        fn = demand
    else:
        try:
            fn = parse_formula(demand)
        except FormulaSyntaxError as exc:
            return _fallback(FallbackReason.PARSE_ERROR, fallback, str(exc))

    if fn.slope == 0:
        return _fallback(FallbackReason.ZERO_SLOPE, fallback, f"slope={fn.slope}")

    scaled = abs(-fn.intercept / fn.slope) * buffer_ratio
    if not is_valid_float(scaled):
        return _fallback(FallbackReason.NON_FINITE, fallback, f"q0*buffer={scaled}")

    bound = ceil_with_tolerance(scaled)
    if bound <= 0:
        return _fallback(FallbackReason.ZERO_BOUND, fallback, f"intercept={fn.intercept}")

    return CalibrationResult(bound=float(bound), source=CalibrationSource.INTERCEPT)


def default_bound(
    demand: Union[LinearFunction, str],
    buffer_ratio: float = DEFAULT_BUFFER_RATIO,
    fallback: float = DEFAULT_FALLBACK_BOUND,
) -> float:
    """Граница оси Q (только число, без источника)."""
    return calibrate_range(demand, buffer_ratio=buffer_ratio, fallback=fallback).bound
