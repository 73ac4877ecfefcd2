"""
Contract Validation Module

Валидация JSON контракта данных диаграммы.
"""

from .validators import (
    DIAGRAM_DATA_SCHEMA,
    DiagramDataValidator,
    load_schema,
    validate_diagram_data,
)

__all__ = [
    "DIAGRAM_DATA_SCHEMA",
    "DiagramDataValidator",
    "load_schema",
    "validate_diagram_data",
]
