"""
JSON Schema Contract Validators

Payload, передаваемый графической библиотеке, проверяется против
JSON Schema контракта перед отдачей (библиотека jsonschema).

Схемы (src/core/contracts/schema/):
- diagram_data.json — наборы точек спроса/предложения и границы осей
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, Final

from jsonschema import Draft202012Validator

SCHEMA_DIR: Final[Path] = Path(__file__).parent / "schema"

DIAGRAM_DATA_SCHEMA: Final[str] = "diagram_data"


@lru_cache(maxsize=None)
def load_schema(schema_name: str) -> Dict[str, Any]:
    """
    Загрузка и meta-валидация схемы (результат кэшируется).

    Raises:
        FileNotFoundError: Если файл схемы не найден
        jsonschema.SchemaError: Если файл не является валидной JSON Schema
    """
    schema_path = SCHEMA_DIR / f"{schema_name}.json"
    with open(schema_path, "r", encoding="utf-8") as f:
        schema = json.load(f)

    Draft202012Validator.check_schema(schema)
    return schema


class DiagramDataValidator:
    """Валидатор payload диаграммы."""

    def __init__(self):
        self.validator = Draft202012Validator(load_schema(DIAGRAM_DATA_SCHEMA))

    def validate(self, payload: Dict[str, Any]) -> None:
        """
        Raises:
            ValidationError: Если payload не соответствует схеме
        """
        self.validator.validate(payload)


def validate_diagram_data(payload: Dict[str, Any]) -> None:
    """
    Валидация payload диаграммы.

    Raises:
        ValidationError: Если payload не соответствует схеме
    """
    DiagramDataValidator().validate(payload)
