"""
OrientedPlane — ориентированная плоскость в 3D

Плоскость задаётся двумя направляющими векторами (horiz, vert) и точкой на
плоскости, а не только нормалью: направления "горизонтально"/"вертикально"
внутри плоскости сохраняются.

Конструирование:
- horiz и vert нормализуются НЕЗАВИСИМО (без взаимной ортогонализации)
- norm = horiz × vert; единичная только при horiz ⟂ vert
- Неортогональные векторы принимаются без проверки; строгая проверка —
  отдельный конструктор orthonormal()

Операции:
- project(p): p − norm·((p − point_on_plane)·norm)
- translate(offset): та же ориентация, точка сдвинута на offset

Предопределённые плоскости через начало координат: XY, ZY, XZ.
"""

import logging
from typing import ClassVar

from pydantic import BaseModel, Field

from src.core.geom.errors import NonOrthogonalBasisError
from src.core.geom.rendering import RenderConfig
from src.core.geom.vector import Vector3
from src.core.math.numerical_safeguards import EPS_ORTHOGONALITY, is_zero

logger = logging.getLogger(__name__)


class OrientedPlane(BaseModel):
    """
    Ориентированная плоскость.

    Attributes:
        horiz: Единичный горизонтальный направляющий вектор
        vert: Единичный вертикальный направляющий вектор
        norm: horiz × vert
        point_on_plane: Точка, через которую проходит плоскость
    """

    horiz: Vector3 = Field(..., description="Горизонтальное направление (нормализовано)")
    vert: Vector3 = Field(..., description="Вертикальное направление (нормализовано)")
    norm: Vector3 = Field(..., description="Нормаль horiz × vert")
    point_on_plane: Vector3 = Field(..., description="Точка на плоскости")

    model_config = {"frozen": True}

    XY: ClassVar["OrientedPlane"]
    ZY: ClassVar["OrientedPlane"]
    XZ: ClassVar["OrientedPlane"]

    def __init__(self, horiz: Vector3, vert: Vector3, point_on_plane: Vector3) -> None:
        h = horiz.normalize()
        v = vert.normalize()
        super().__init__(horiz=h, vert=v, norm=h.cross(v), point_on_plane=point_on_plane)

    @classmethod
    def orthonormal(
        cls,
        horiz: Vector3,
        vert: Vector3,
        point_on_plane: Vector3,
        abs_tol: float = EPS_ORTHOGONALITY,
    ) -> "OrientedPlane":
        """
        Строгий конструктор: направляющие векторы обязаны быть ортогональны.

        Ортогональность проверяется после нормализации: |horiz · vert| <= abs_tol.

        Raises:
            NonOrthogonalBasisError: Если векторы не ортогональны
                (или вырождены, т.е. скалярное произведение — nan)
        """
        dot = horiz.normalize().dot(vert.normalize())
        if not is_zero(dot, abs_tol):
            logger.debug("Rejected non-orthogonal plane basis: horiz=%s vert=%s", horiz, vert)
            raise NonOrthogonalBasisError(dot, abs_tol)
        return cls(horiz, vert, point_on_plane)

    def project(self, p: Vector3) -> Vector3:
        """
        Ортогональная проекция точки на плоскость вдоль нормали.

        Формула:
            p − norm · ((p − point_on_plane) · norm)

        Корректна при единичной нормали (horiz ⟂ vert); для неортогонального
        базиса проекция искажается.
        """
        return p.sub(self.norm.mul(p.sub(self.point_on_plane).dot(self.norm)))

    def translate(self, offset: Vector3) -> "OrientedPlane":
        """Плоскость той же ориентации, сдвинутая на offset."""
        return OrientedPlane(self.horiz, self.vert, self.point_on_plane.add(offset))

    def to_text(self, config: RenderConfig | None = None) -> str:
        return (
            f"horiz: {self.horiz.to_text(config)}\t"
            f"vert: {self.vert.to_text(config)}\t"
            f"point: {self.point_on_plane.to_text(config)}"
        )

    def __str__(self) -> str:
        return self.to_text()


OrientedPlane.XY = OrientedPlane(Vector3.X, Vector3.Y, Vector3.ZERO)
OrientedPlane.ZY = OrientedPlane(Vector3.Z, Vector3.Y, Vector3.ZERO)
OrientedPlane.XZ = OrientedPlane(Vector3.X, Vector3.Z, Vector3.ZERO)
