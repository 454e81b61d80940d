"""
Rendering — текстовое представление геометрических значений

Человекочитаемый вывод для диагностики и логов: координаты и строки матриц
с фиксированной точностью. Формат детерминирован, но не является контрактом
и может меняться.
"""

from dataclasses import dataclass
from typing import Final, Iterable

# =============================================================================
# CONSTANTS
# =============================================================================

# Количество знаков после запятой по умолчанию
DEFAULT_PRECISION: Final[int] = 3


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class RenderConfig:
    """Конфигурация текстового вывода.

    Передаётся в to_text() любого геометрического типа; при None
    используется конфигурация по умолчанию.
    """

    precision: int = DEFAULT_PRECISION
    separator: str = ", "

    def __post_init__(self):
        if self.precision < 0:
            raise ValueError(f"precision must be non-negative, got {self.precision}")


DEFAULT_RENDER_CONFIG: Final[RenderConfig] = RenderConfig()


# =============================================================================
# FORMATTERS
# =============================================================================


def format_scalar(value: float, config: RenderConfig | None = None) -> str:
    """Скаляр с фиксированной точностью (nan/inf выводятся как есть)."""
    config = config or DEFAULT_RENDER_CONFIG
    return f"{value:.{config.precision}f}"


def format_components(values: Iterable[float], config: RenderConfig | None = None) -> str:
    """
    Компоненты вектора в квадратных скобках.

    Examples:
        >>> format_components((1.0, 2.5))
        '[1.000, 2.500]'
    """
    config = config or DEFAULT_RENDER_CONFIG
    return "[" + config.separator.join(format_scalar(v, config) for v in values) + "]"


def format_matrix_rows(
    rows: Iterable[Iterable[float]], config: RenderConfig | None = None
) -> str:
    """
    Строки матрицы, по одной на линию, в вертикальных чертах.

    Examples:
        >>> print(format_matrix_rows(((1.0, 0.0), (0.0, 1.0))))
        | 1.000, 0.000 |
        | 0.000, 1.000 |
    """
    config = config or DEFAULT_RENDER_CONFIG
    return "\n".join(
        "| " + config.separator.join(format_scalar(v, config) for v in row) + " |"
        for row in rows
    )
