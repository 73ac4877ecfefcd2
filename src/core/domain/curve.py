"""
Curve — Модели линейной функции цены и дискретной кривой

Immutable модели:
- LinearFunction: P = slope * Q + intercept
- Point: одна точка (quantity, price) на графике
- Curve: упорядоченная последовательность Point (порядок = порядок отрисовки)
"""

from dataclasses import dataclass
from typing import Iterator

from pydantic import BaseModel, Field


# =============================================================================
# MODELS
# =============================================================================


class LinearFunction(BaseModel):
    """
    Цена как аффинная функция количества: P = slope * Q + intercept.

    Создаётся заново при каждом разборе формулы. Переполнение не
    валидируется, поэтому slope/intercept могут быть бесконечными.
    """

    slope: float = Field(..., description="Коэффициент при Q")
    intercept: float = Field(..., description="Цена при Q = 0")

    model_config = {"frozen": True}

    def evaluate(self, quantity: float) -> float:
        """Цена в точке quantity без ограничения снизу."""
        return self.slope * quantity + self.intercept


class Point(BaseModel):
    """Точка кривой."""

    quantity: float = Field(..., description="Количество (ось X)")
    price: float = Field(..., description="Цена (ось Y)")

    model_config = {"frozen": True}


@dataclass(frozen=True)
class Curve:
    """
    Дискретная кривая: точки с возрастающим целым quantity от 0 до bound.

    Ведёт себя как неизменяемая последовательность Point.
    """

    points: tuple[Point, ...] = ()

    def __len__(self) -> int:
        return len(self.points)

    def __iter__(self) -> Iterator[Point]:
        return iter(self.points)

    def __getitem__(self, index: int) -> Point:
        return self.points[index]

    def quantities(self) -> list[float]:
        return [p.quantity for p in self.points]

    def prices(self) -> list[float]:
        return [p.price for p in self.points]

    def max_price(self) -> float:
        """
        Максимальная цена на кривой.

        Raises:
            ValueError: Если кривая пустая
        """
        if not self.points:
            raise ValueError("Cannot take max_price of an empty curve")
        return max(p.price for p in self.points)

    def to_xy(self) -> list[dict[str, float]]:
        """Точки в формате {"x": Q, "y": P} для графической библиотеки."""
        return [{"x": p.quantity, "y": p.price} for p in self.points]
