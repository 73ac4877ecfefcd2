"""Diagram — разбор формул, сэмплирование кривых и калибровка оси Q.

Компоненты:
- FormulaParser: текст → LinearFunction
- CurveSampler: LinearFunction + граница → Curve
- RangeCalibrator: кривая спроса → граница оси Q по умолчанию
- DiagramController: headless поток генерации диаграммы
"""

from .controller import (
    DiagnosticsSink,
    DiagramController,
    DiagramData,
    LoggingDiagnosticsSink,
    coerce_bound,
)
from .curve_sampler import sample_curve
from .formula_parser import FormulaSyntaxError, parse_formula
from .presets import EXAMPLE_PRESETS, FormulaPreset, get_preset
from .range_calibrator import (
    CalibrationResult,
    CalibrationSource,
    FallbackReason,
    calibrate_range,
    default_bound,
)
from .settings import DiagramSettings

__all__ = [
    # Parser
    "FormulaSyntaxError",
    "parse_formula",
    # Sampler
    "sample_curve",
    # Calibrator
    "CalibrationResult",
    "CalibrationSource",
    "FallbackReason",
    "calibrate_range",
    "default_bound",
    # Controller
    "DiagnosticsSink",
    "DiagramController",
    "DiagramData",
    "LoggingDiagnosticsSink",
    "coerce_bound",
    # Config
    "DiagramSettings",
    # Presets
    "EXAMPLE_PRESETS",
    "FormulaPreset",
    "get_preset",
]
