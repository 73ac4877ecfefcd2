"""Примеры пар формул спроса и предложения."""

from dataclasses import dataclass


@dataclass(frozen=True)
class FormulaPreset:
    name: str
    supply: str
    demand: str


EXAMPLE_PRESETS: tuple[FormulaPreset, ...] = (
    FormulaPreset(name="Basic Supply & Demand", supply="2*Q + 10", demand="-1*Q + 50"),
    FormulaPreset(name="Elastic Demand", supply="1.5*Q + 5", demand="-2*Q + 60"),
    FormulaPreset(name="Inelastic Supply", supply="0.5*Q + 15", demand="-1.5*Q + 45"),
)


def get_preset(name: str) -> FormulaPreset:
    """
    Поиск примера по имени.

    Raises:
        KeyError: Если пример не найден
    """
    for preset in EXAMPLE_PRESETS:
        if preset.name == name:
            return preset
    raise KeyError(f"Unknown preset: {name!r}")
