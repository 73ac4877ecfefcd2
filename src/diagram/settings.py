"""
DiagramSettings — Конфигурация построения диаграммы

Все настраиваемые константы генератора диаграмм в одной immutable модели.
Значения по умолчанию экспортируются как Final константы модуля.
"""

from typing import Final

from pydantic import BaseModel, Field


# =============================================================================
# DEFAULTS
# =============================================================================

# Запас по оси Q сверх точки пересечения спроса с осью (10%)
DEFAULT_BUFFER_RATIO: Final[float] = 1.1

# Граница оси Q, если калибровка невозможна
DEFAULT_FALLBACK_BOUND: Final[float] = 50.0

# Цена не опускается ниже этого значения (экономическая неотрицательность)
DEFAULT_PRICE_FLOOR: Final[float] = 0.0

# Запас по оси P над максимальной ценой
DEFAULT_PRICE_HEADROOM: Final[float] = 10.0

# Максимальная граница оси Q (ограничивает память и время отрисовки)
DEFAULT_MAX_BOUND: Final[int] = 5000


# =============================================================================
# SETTINGS MODEL
# =============================================================================


class DiagramSettings(BaseModel):
    """Параметры калибровки, сэмплирования и осей диаграммы."""

    buffer_ratio: float = Field(
        DEFAULT_BUFFER_RATIO, gt=0, allow_inf_nan=False, description="Множитель запаса оси Q"
    )
    fallback_bound: float = Field(
        DEFAULT_FALLBACK_BOUND, ge=1, allow_inf_nan=False, description="Граница оси Q по умолчанию"
    )
    price_floor: float = Field(
        DEFAULT_PRICE_FLOOR, allow_inf_nan=False, description="Нижняя граница цены"
    )
    price_headroom: float = Field(
        DEFAULT_PRICE_HEADROOM, ge=0, allow_inf_nan=False, description="Запас оси P"
    )
    max_bound: int = Field(DEFAULT_MAX_BOUND, gt=0, description="Максимальная граница оси Q")

    model_config = {"frozen": True}
