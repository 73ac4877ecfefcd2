"""
Tests for curve domain models

Покрывает:
- LinearFunction: вычисление, immutability, валидация типов
- Point: immutability
- Curve: поведение последовательности
- DiagramSettings: значения по умолчанию и constraints
"""

import pytest
from pydantic import ValidationError

from src.core.domain import Curve, LinearFunction, Point
from src.diagram.settings import (
    DEFAULT_BUFFER_RATIO,
    DEFAULT_FALLBACK_BOUND,
    DEFAULT_MAX_BOUND,
    DEFAULT_PRICE_FLOOR,
    DEFAULT_PRICE_HEADROOM,
    DiagramSettings,
)


class TestLinearFunction:
    """Тесты LinearFunction"""

    def test_evaluate(self) -> None:
        fn = LinearFunction(slope=2.0, intercept=10.0)
        assert fn.evaluate(0) == 10.0
        assert fn.evaluate(55) == 120.0

    def test_evaluate_not_floored(self) -> None:
        """evaluate возвращает «сырую» цену, в том числе отрицательную"""
        assert LinearFunction(slope=-1.0, intercept=5.0).evaluate(10) == -5.0

    def test_frozen(self) -> None:
        fn = LinearFunction(slope=1.0, intercept=0.0)
        with pytest.raises(ValidationError):
            fn.slope = 3.0  # type: ignore[misc]

    def test_ints_coerced_to_float(self) -> None:
        fn = LinearFunction(slope=2, intercept=10)
        assert isinstance(fn.slope, float)

    def test_invalid_type(self) -> None:
        with pytest.raises(ValidationError):
            LinearFunction(slope="abc", intercept=1.0)

    def test_hashable(self) -> None:
        assert len({LinearFunction(slope=1, intercept=2), LinearFunction(slope=1, intercept=2)}) == 1


class TestPointAndCurve:
    """Тесты Point и Curve"""

    def test_point_frozen(self) -> None:
        point = Point(quantity=1.0, price=2.0)
        with pytest.raises(ValidationError):
            point.price = 5.0  # type: ignore[misc]

    def test_curve_sequence_protocol(self) -> None:
        points = (Point(quantity=0, price=3.0), Point(quantity=1, price=4.0))
        curve = Curve(points=points)
        assert len(curve) == 2
        assert list(curve) == list(points)
        assert curve[1].price == 4.0
        assert curve.quantities() == [0.0, 1.0]
        assert curve.prices() == [3.0, 4.0]

    def test_empty_curve(self) -> None:
        assert len(Curve()) == 0
        assert Curve().to_xy() == []


class TestDiagramSettings:
    """Тесты DiagramSettings"""

    def test_defaults(self) -> None:
        settings = DiagramSettings()
        assert settings.buffer_ratio == DEFAULT_BUFFER_RATIO == 1.1
        assert settings.fallback_bound == DEFAULT_FALLBACK_BOUND == 50.0
        assert settings.price_floor == DEFAULT_PRICE_FLOOR == 0.0
        assert settings.price_headroom == DEFAULT_PRICE_HEADROOM == 10.0
        assert settings.max_bound == DEFAULT_MAX_BOUND == 5000

    def test_from_dict(self) -> None:
        settings = DiagramSettings.model_validate({"buffer_ratio": 1.5, "max_bound": 100})
        assert settings.buffer_ratio == 1.5
        assert settings.max_bound == 100

    @pytest.mark.parametrize(
        "field,value",
        [
            ("buffer_ratio", 0.0),
            ("buffer_ratio", float("nan")),
            ("fallback_bound", -1.0),
            ("fallback_bound", 0.5),
            ("price_headroom", -0.1),
            ("max_bound", 0),
        ],
    )
    def test_invalid_values(self, field: str, value: float) -> None:
        with pytest.raises(ValidationError):
            DiagramSettings(**{field: value})

    def test_frozen(self) -> None:
        settings = DiagramSettings()
        with pytest.raises(ValidationError):
            settings.max_bound = 10  # type: ignore[misc]
