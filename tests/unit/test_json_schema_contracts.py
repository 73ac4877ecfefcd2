"""
Tests for JSON Schema Contract Validators

Покрывает:
- Загрузку и meta-валидацию схемы diagram_data
- Проверку контракта при экспорте payload (DiagramData.to_payload)
- Детекцию нарушений required полей, типов и constraints
"""

import copy

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    DIAGRAM_DATA_SCHEMA,
    DiagramDataValidator,
    load_schema,
    validate_diagram_data,
)
from src.core.domain.curve import Curve, Point
from src.diagram.controller import DiagramController, DiagramData


@pytest.fixture
def sink():
    class _Sink:
        def __init__(self) -> None:
            self.reports = []

        def report(self, message, error) -> None:
            self.reports.append((message, error))

    return _Sink()


@pytest.fixture
def valid_payload():
    """Payload для "2*Q+10" / "-1*Q+50" с границей 5."""
    controller = DiagramController("2*Q+10", "-1*Q+50")
    controller.set_bound("5")
    data = controller.generate()
    assert data is not None
    return data.to_payload()


def _one_point_curve(quantity: float = 0.0, price: float = 1.0) -> Curve:
    return Curve(points=(Point(quantity=quantity, price=price),))


class TestSchemaLoading:
    """Тесты загрузки схемы"""

    def test_load_diagram_data(self) -> None:
        schema = load_schema(DIAGRAM_DATA_SCHEMA)
        assert schema["title"] == "diagram_data"

    def test_schema_cached(self) -> None:
        assert load_schema(DIAGRAM_DATA_SCHEMA) is load_schema(DIAGRAM_DATA_SCHEMA)

    def test_missing_schema(self) -> None:
        with pytest.raises(FileNotFoundError):
            load_schema("no_such_schema")


class TestPayloadExport:
    """Контракт проверяется при экспорте payload"""

    def test_controller_payload_valid(self, valid_payload) -> None:
        validate_diagram_data(valid_payload)
        assert valid_payload["max_quantity"] == 5

    def test_generate_payload_runs_contract(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """generate_payload отдаёт payload только через проверку контракта"""
        calls = []
        monkeypatch.setattr(
            "src.diagram.controller.validate_diagram_data",
            lambda payload: calls.append(payload),
        )
        controller = DiagramController("2*Q+10", "-1*Q+50")
        payload = controller.generate_payload()
        assert payload is not None
        assert calls == [payload]

    def test_generate_payload_none_on_bad_formula(self, sink) -> None:
        controller = DiagramController("2*P+10", "-1*Q+50", diagnostics=sink)
        assert controller.generate_payload() is None
        assert len(sink.reports) == 1

    def test_invalid_data_rejected_on_export(self) -> None:
        """Пустая кривая нарушает контракт (minItems) при экспорте"""
        data = DiagramData(
            supply=Curve(), demand=_one_point_curve(), max_quantity=0, max_price=1.0
        )
        with pytest.raises(ValidationError):
            data.to_payload()

    def test_negative_quantity_rejected_on_export(self) -> None:
        data = DiagramData(
            supply=_one_point_curve(quantity=-1.0),
            demand=_one_point_curve(),
            max_quantity=0,
            max_price=1.0,
        )
        with pytest.raises(ValidationError):
            data.to_payload()

    def test_validation_can_be_skipped(self) -> None:
        data = DiagramData(
            supply=Curve(), demand=_one_point_curve(), max_quantity=0, max_price=1.0
        )
        payload = data.to_payload(validate=False)
        assert payload["datasets"][0]["data"] == []


class TestDiagramDataContract:
    """Тесты ограничений схемы diagram_data"""

    def test_missing_required_field(self, valid_payload) -> None:
        del valid_payload["max_price"]
        with pytest.raises(ValidationError):
            validate_diagram_data(valid_payload)

    def test_unknown_label(self, valid_payload) -> None:
        payload = copy.deepcopy(valid_payload)
        payload["datasets"][0]["label"] = "Equilibrium"
        with pytest.raises(ValidationError):
            DiagramDataValidator().validate(payload)

    def test_single_dataset_rejected(self, valid_payload) -> None:
        valid_payload["datasets"] = valid_payload["datasets"][:1]
        with pytest.raises(ValidationError):
            validate_diagram_data(valid_payload)

    def test_non_integer_max_quantity_rejected(self, valid_payload) -> None:
        valid_payload["max_quantity"] = 5.5
        with pytest.raises(ValidationError):
            validate_diagram_data(valid_payload)
