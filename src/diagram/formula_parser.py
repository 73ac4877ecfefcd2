"""
FormulaParser — Разбор линейной формулы цены

Принимает текст вида "2*Q + 10" и возвращает LinearFunction(slope, intercept).

Грамматика (регистр и пробелы игнорируются):
    [sign][digits][.digits][*]Q<sign>[digits][.digits]

- Коэффициент необязателен: "" или "+" → 1, "-" → -1
- Знак свободного члена обязателен: "Q" без "+5"/"-5" отвергается
- Число должно содержать хотя бы одну цифру ("2.", ".5", "2.5")
- Переполнение не проверяется: очень длинное число даёт inf

Функция чистая и детерминированная.
"""

import re
from typing import Final

from src.core.domain.curve import LinearFunction

# Число: "2", "2.", "2.5", ".5"
_NUMBER: Final[str] = r"(?:\d+\.?\d*|\.\d+)"

FORMULA_PATTERN: Final[re.Pattern[str]] = re.compile(
    rf"^(?P<coefficient>[+-]?{_NUMBER}?)\*?q(?P<constant>[+-]{_NUMBER})$",
    re.ASCII,
)

_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"\s+")


# =============================================================================
# EXCEPTIONS
# =============================================================================


class FormulaSyntaxError(ValueError):
    """
    Текст формулы не соответствует грамматике.

    Хранит исходный (неизменённый) текст для диагностики.
    """

    def __init__(self, formula: str, detail: str = "Invalid formula format"):
        self.formula = formula
        self.detail = detail
        super().__init__(f"{detail}: {formula!r}")


# =============================================================================
# PARSER
# =============================================================================


def _resolve_coefficient(token: str) -> float:
    if token in ("", "+"):
        return 1.0
    if token == "-":
        return -1.0
    return float(token)


def _resolve_constant(token: str | None) -> float:
    if not token:
        return 0.0
    return float(token)


def parse_formula(text: str) -> LinearFunction:
    """
    Разбор линейной формулы в LinearFunction.

    Args:
        text: Формула, например "2*Q + 10", "-Q+50", "1.5 q - 3"

    Returns:
        LinearFunction(slope=коэффициент при Q, intercept=свободный член)

    Raises:
        FormulaSyntaxError: Если текст не соответствует грамматике

    Examples:
        >>> parse_formula("2*Q + 10")
        LinearFunction(slope=2.0, intercept=10.0)
        >>> parse_formula("-Q+5")
        LinearFunction(slope=-1.0, intercept=5.0)
    """
    if not isinstance(text, str):
        raise FormulaSyntaxError(str(text), "Formula must be a string")

    clean = _WHITESPACE.sub("", text).lower()
    match = FORMULA_PATTERN.match(clean)

    if match is None:
        raise FormulaSyntaxError(text)

    return LinearFunction(
        slope=_resolve_coefficient(match.group("coefficient")),
        intercept=_resolve_constant(match.group("constant")),
    )
