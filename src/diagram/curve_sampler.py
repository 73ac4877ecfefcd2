"""
CurveSampler — Дискретизация линейной функции цены

Для каждого целого Q от 0 до floor(bound) включительно:
    P = slope * Q + intercept, P = max(P, price_floor)

ИНВАРИАНТ: кривая содержит ровно floor(bound) + 1 точек с quantity 0..floor(bound)
в порядке возрастания. Цены не обязаны быть монотонными.
"""

import math

from src.core.domain.curve import Curve, LinearFunction, Point
from src.core.math.numerical_safeguards import validate_non_negative


def sample_curve(
    fn: LinearFunction,
    bound: float,
    price_floor: float = 0.0,
) -> Curve:
    """
    Построение кривой по линейной функции.

    Args:
        fn: Линейная функция цены
        bound: Верхняя граница оси Q (конечная, >= 0; дробная часть отбрасывается)
        price_floor: Нижняя граница цены (default: 0.0)

    Returns:
        Curve из floor(bound) + 1 точек

    Raises:
        ValueError: Если bound отрицательный или NaN/Inf
    """
    validate_non_negative(bound, "bound")

    points = []
    for quantity in range(math.floor(bound) + 1):
        price = fn.evaluate(quantity)
        # Цена не может быть ниже floor
        if price < price_floor:
            price = price_floor
        points.append(Point(quantity=quantity, price=price))

    return Curve(points=tuple(points))
