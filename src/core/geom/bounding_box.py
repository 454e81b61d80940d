"""
BoundingBox — осе-выровненные ограничивающие прямоугольники 2D/3D

Immutable Pydantic модели, строящиеся свёрткой точек через union():
- BoundingBox2() / BoundingBox3() — выделенный ПУСТОЙ бокс (start = end = ZERO)
- union(p): пустой бокс → вырожденный [p, p]; иначе покомпонентные min/max
- from_points(points): левая свёртка union от пустого бокса
- get_centroid(): (start + end) / 2

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Пустота хранится явным флагом empty, а не сравнением start/end с ZERO:
   бокс из единственной точки (0, 0) НЕ пустой
2. После первого union: start <= end покомпонентно
3. Результат from_points не зависит от порядка точек
4. get_centroid() пустого бокса — нулевой вектор (без особой обработки)
"""

from typing import Iterable, Tuple

from pydantic import BaseModel, Field, model_validator

from src.core.geom.rendering import RenderConfig
from src.core.geom.vector import Vector2, Vector3
from src.core.math.numerical_safeguards import ieee_max, ieee_min


# =============================================================================
# INVARIANTS
# =============================================================================


def _validate_corners(
    empty: bool,
    start: Tuple[float, ...],
    end: Tuple[float, ...],
) -> None:
    """
    Проверка инвариантов углов бокса.

    - Пустой бокс: start == end == ZERO
    - Непустой: start <= end покомпонентно (NaN-компоненты пропускаются)

    Raises:
        ValueError: При нарушении инварианта
    """
    if empty:
        if any(c != 0 for c in start + end):
            raise ValueError(
                f"empty bounding box must have start == end == ZERO, got {start} -> {end}"
            )
        return

    for axis, (s, e) in enumerate(zip(start, end)):
        # NaN не сравним ни с чем: s > e ложно
        if s > e:
            raise ValueError(
                f"bounding box start must not exceed end on axis {axis}: {s} > {e}"
            )


# =============================================================================
# BOUNDING BOX 2D
# =============================================================================


class BoundingBox2(BaseModel):
    """Ограничивающий прямоугольник на плоскости."""

    start: Vector2 = Field(default=Vector2.ZERO, description="Минимальный угол")
    end: Vector2 = Field(default=Vector2.ZERO, description="Максимальный угол")
    empty: bool = Field(default=True, description="Бокс не содержит ни одной точки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_corners(self) -> "BoundingBox2":
        """Пустой бокс лежит в нуле; у непустого start <= end."""
        _validate_corners(self.empty, self.start.as_tuple(), self.end.as_tuple())
        return self

    def is_empty(self) -> bool:
        return self.empty

    def union(self, v: Vector2) -> "BoundingBox2":
        """
        Расширение бокса точкой v.

        Args:
            v: Добавляемая точка

        Returns:
            Новый бокс; для пустого — вырожденный [v, v]
        """
        if self.is_empty():
            return BoundingBox2(start=v, end=v, empty=False)

        s = Vector2(ieee_min(v.x, self.start.x), ieee_min(v.y, self.start.y))
        e = Vector2(ieee_max(v.x, self.end.x), ieee_max(v.y, self.end.y))
        return BoundingBox2(start=s, end=e, empty=False)

    def get_centroid(self) -> Vector2:
        """Центр бокса: (start + end) / 2."""
        return self.start.add(self.end).div(2)

    @staticmethod
    def from_points(points: Iterable[Vector2]) -> "BoundingBox2":
        """
        Бокс, охватывающий все точки.

        Пустая последовательность даёт пустой бокс.
        """
        box = BoundingBox2()
        for p in points:
            box = box.union(p)
        return box

    def to_text(self, config: RenderConfig | None = None) -> str:
        return f"{self.start.to_text(config)} -> {self.end.to_text(config)}"

    def __str__(self) -> str:
        return self.to_text()


# =============================================================================
# BOUNDING BOX 3D
# =============================================================================


class BoundingBox3(BaseModel):
    """Ограничивающий параллелепипед в пространстве."""

    start: Vector3 = Field(default=Vector3.ZERO, description="Минимальный угол")
    end: Vector3 = Field(default=Vector3.ZERO, description="Максимальный угол")
    empty: bool = Field(default=True, description="Бокс не содержит ни одной точки")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_corners(self) -> "BoundingBox3":
        """Пустой бокс лежит в нуле; у непустого start <= end."""
        _validate_corners(self.empty, self.start.as_tuple(), self.end.as_tuple())
        return self

    def is_empty(self) -> bool:
        return self.empty

    def union(self, v: Vector3) -> "BoundingBox3":
        """
        Расширение бокса точкой v.

        Args:
            v: Добавляемая точка

        Returns:
            Новый бокс; для пустого — вырожденный [v, v]
        """
        if self.is_empty():
            return BoundingBox3(start=v, end=v, empty=False)

        s = Vector3(
            ieee_min(v.x, self.start.x),
            ieee_min(v.y, self.start.y),
            ieee_min(v.z, self.start.z),
        )
        e = Vector3(
            ieee_max(v.x, self.end.x),
            ieee_max(v.y, self.end.y),
            ieee_max(v.z, self.end.z),
        )
        return BoundingBox3(start=s, end=e, empty=False)

    def get_centroid(self) -> Vector3:
        """Центр бокса: (start + end) / 2."""
        return self.start.add(self.end).div(2)

    @staticmethod
    def from_points(points: Iterable[Vector3]) -> "BoundingBox3":
        """
        Бокс, охватывающий все точки.

        Пустая последовательность даёт пустой бокс.
        """
        box = BoundingBox3()
        for p in points:
            box = box.union(p)
        return box

    def to_text(self, config: RenderConfig | None = None) -> str:
        return f"{self.start.to_text(config)} -> {self.end.to_text(config)}"

    def __str__(self) -> str:
        return self.to_text()
