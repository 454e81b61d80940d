"""
LineSegment — отрезки 2D/3D

Immutable пара обязательных концов start/end. Вырожденный отрезок
(start == end) допустим. Отсутствующий конец (None) отклоняется
при конструировании (pydantic.ValidationError).
"""

from pydantic import BaseModel, Field

from src.core.geom.rendering import RenderConfig
from src.core.geom.vector import Vector2, Vector3


class LineSegment2(BaseModel):
    """Отрезок на плоскости."""

    start: Vector2 = Field(..., description="Начальная точка")
    end: Vector2 = Field(..., description="Конечная точка")

    model_config = {"frozen": True}

    def __init__(self, start: Vector2, end: Vector2) -> None:
        super().__init__(start=start, end=end)

    def get_midpoint(self) -> Vector2:
        """Середина отрезка: (start + end) / 2."""
        return self.start.add(self.end).div(2)

    def to_text(self, config: RenderConfig | None = None) -> str:
        return f"| {self.start.to_text(config)} -> {self.end.to_text(config)} |"

    def __str__(self) -> str:
        return self.to_text()


class LineSegment3(BaseModel):
    """Отрезок в пространстве."""

    start: Vector3 = Field(..., description="Начальная точка")
    end: Vector3 = Field(..., description="Конечная точка")

    model_config = {"frozen": True}

    def __init__(self, start: Vector3, end: Vector3) -> None:
        super().__init__(start=start, end=end)

    def get_midpoint(self) -> Vector3:
        """Середина отрезка: (start + end) / 2."""
        return self.start.add(self.end).div(2)

    def to_text(self, config: RenderConfig | None = None) -> str:
        return f"| {self.start.to_text(config)} -> {self.end.to_text(config)} |"

    def __str__(self) -> str:
        return self.to_text()
