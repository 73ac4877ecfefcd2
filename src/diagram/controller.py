"""
DiagramController — Headless контроллер диаграммы спроса и предложения

Хранит текстовые поля (предложение, спрос, граница оси Q) и реализует
поток генерации без привязки к UI:

1. При изменении спроса граница оси Q пересчитывается (RangeCalibrator)
2. Пустая или неположительная граница заменяется калиброванной
3. Граница ограничивается сверху max_bound
4. Обе формулы разбираются, обе кривые сэмплируются
5. FormulaSyntaxError передаётся в diagnostics sink, генерация отменяется

Отрисовка, стили и события UI — ответственность внешнего слоя.
"""

import logging
import re
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol

from src.core.contracts import validate_diagram_data
from src.core.domain.curve import Curve
from src.core.math.numerical_safeguards import clamp
from src.diagram.curve_sampler import sample_curve
from src.diagram.formula_parser import FormulaSyntaxError, parse_formula
from src.diagram.presets import EXAMPLE_PRESETS
from src.diagram.range_calibrator import CalibrationResult, calibrate_range
from src.diagram.settings import DiagramSettings

logger = logging.getLogger(__name__)

FORMULA_HINT = "Use format: slope*Q + intercept (e.g., 2*Q + 10)"

# Ведущее целое: "55.7" → 55, " 12abc" → 12
_INT_PREFIX = re.compile(r"^\s*([+-]?\d+)", re.ASCII)


# =============================================================================
# DIAGNOSTICS
# =============================================================================


class DiagnosticsSink(Protocol):
    """Получатель сообщений об ошибках формул (показывает их пользователю)."""

    def report(self, message: str, error: FormulaSyntaxError) -> None: ...


class LoggingDiagnosticsSink:
    """Diagnostics sink по умолчанию: пишет предупреждение в лог."""

    def report(self, message: str, error: FormulaSyntaxError) -> None:
        logger.warning("%s (formula=%r)", message, error.formula)


# =============================================================================
# DIAGRAM DATA
# =============================================================================


@dataclass(frozen=True)
class DiagramData:
    """Данные для графической библиотеки: две кривые и границы осей."""

    supply: Curve
    demand: Curve
    max_quantity: int
    max_price: float

    def to_payload(self, validate: bool = True) -> Dict[str, Any]:
        """
        Payload в формате контракта diagram_data.

        Args:
            validate: проверить payload против JSON Schema перед отдачей

        Raises:
            ValidationError: Если payload не соответствует контракту
        """
        payload = {
            "max_quantity": self.max_quantity,
            "max_price": self.max_price,
            "datasets": [
                {"label": "Supply", "data": self.supply.to_xy()},
                {"label": "Demand", "data": self.demand.to_xy()},
            ],
        }
        if validate:
            validate_diagram_data(payload)
        return payload


# =============================================================================
# CONTROLLER
# =============================================================================


def coerce_bound(text: str) -> Optional[int]:
    """
    Целое из текста границы оси Q по ведущим цифрам.

    Returns:
        Целое число или None, если ведущего целого нет
    """
    match = _INT_PREFIX.match(text or "")
    if match is None:
        return None
    return int(match.group(1))


class DiagramController:
    """
    Контроллер состояния формы диаграммы.

    При создании калибрует границу оси Q по формуле спроса.
    """

    def __init__(
        self,
        supply_text: str = EXAMPLE_PRESETS[0].supply,
        demand_text: str = EXAMPLE_PRESETS[0].demand,
        settings: Optional[DiagramSettings] = None,
        diagnostics: Optional[DiagnosticsSink] = None,
    ):
        """
        Args:
            supply_text: формула предложения
            demand_text: формула спроса
            settings: параметры диаграммы (default: DiagramSettings())
            diagnostics: получатель ошибок формул (default: LoggingDiagnosticsSink)
        """
        self.settings = settings or DiagramSettings()
        self.diagnostics = diagnostics or LoggingDiagnosticsSink()
        self.supply_text = supply_text
        self.demand_text = demand_text
        self.bound_text = ""
        self.last_calibration: Optional[CalibrationResult] = None
        self.update_default_range()

    def set_supply(self, text: str) -> None:
        self.supply_text = text

    def set_demand(self, text: str) -> CalibrationResult:
        """Новая формула спроса; граница оси Q пересчитывается."""
        self.demand_text = text
        return self.update_default_range()

    def set_bound(self, text: str) -> None:
        self.bound_text = text

    def commit_bound(self) -> None:
        """Пустая или неположительная граница заменяется калиброванной."""
        bound = coerce_bound(self.bound_text)
        if bound is None or bound <= 0:
            self.update_default_range()

    def update_default_range(self) -> CalibrationResult:
        """Калибровка границы оси Q по текущей формуле спроса."""
        result = calibrate_range(
            self.demand_text,
            buffer_ratio=self.settings.buffer_ratio,
            fallback=self.settings.fallback_bound,
        )
        self.last_calibration = result
        self.bound_text = str(int(result.bound))
        return result

    def resolve_bound(self) -> int:
        """Текущая граница оси Q: с калибровкой при необходимости и ограничением сверху."""
        bound = coerce_bound(self.bound_text)
        if bound is None or bound <= 0:
            bound = int(self.update_default_range().bound)

        return int(clamp(bound, 0, self.settings.max_bound))

    def generate(self) -> Optional[DiagramData]:
        """
        Генерация обеих кривых.

        Returns:
            DiagramData или None, если формула не разобрана
            (ошибка передана в diagnostics sink)
        """
        max_quantity = self.resolve_bound()

        try:
            supply_fn = parse_formula(self.supply_text)
            demand_fn = parse_formula(self.demand_text)
        except FormulaSyntaxError as exc:
            self.diagnostics.report(f"Please check your formulas. {FORMULA_HINT}", exc)
            return None

        supply = sample_curve(supply_fn, max_quantity, price_floor=self.settings.price_floor)
        demand = sample_curve(demand_fn, max_quantity, price_floor=self.settings.price_floor)

        max_price = max(supply.max_price(), demand.max_price()) + self.settings.price_headroom

        logger.debug(
            "Generated diagram: max_quantity=%d, max_price=%s, supply=%s, demand=%s",
            max_quantity,
            max_price,
            supply_fn,
            demand_fn,
        )

        return DiagramData(
            supply=supply,
            demand=demand,
            max_quantity=max_quantity,
            max_price=max_price,
        )

    def generate_payload(self) -> Optional[Dict[str, Any]]:
        """
        Генерация и экспорт payload для графической библиотеки.

        Returns:
            Payload, прошедший проверку контракта diagram_data, или None,
            если формула не разобрана
        """
        data = self.generate()
        if data is None:
            return None
        return data.to_payload()
