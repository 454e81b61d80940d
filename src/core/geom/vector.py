"""
Vector — 2D/3D векторы

Immutable Pydantic модели координатных векторов с базовой алгеброй:
- add/sub: покомпонентно
- mul/div: умножение/деление на скаляр
- length/normalize: евклидова норма и единичный вектор
- Vector3: cross (правая тройка) и dot

Все операции возвращают новый экземпляр; операнды не меняются.

ЧИСЛЕННЫЕ СОГЛАШЕНИЯ:
1. div(0) НЕ бросает исключение: результат inf/nan по правилам IEEE-754
2. normalize() нулевого вектора даёт вектор из nan (0/0), без защиты
3. Сравнение == структурное (по значениям компонент), не по ссылке
"""

import math
from typing import ClassVar, Tuple

from pydantic import BaseModel, Field

from src.core.geom.rendering import RenderConfig, format_components
from src.core.math.numerical_safeguards import (
    EPS_GEOM_COMPARE_ABS,
    EPS_GEOM_COMPARE_REL,
    ieee_divide,
    is_close,
)


# =============================================================================
# VECTOR2
# =============================================================================


class Vector2(BaseModel):
    """
    Двумерный вектор.

    Константы: ZERO, X, Y (единичные оси).
    """

    x: float = Field(..., description="Компонента X")
    y: float = Field(..., description="Компонента Y")

    model_config = {"frozen": True}

    ZERO: ClassVar["Vector2"]
    X: ClassVar["Vector2"]
    Y: ClassVar["Vector2"]

    def __init__(self, x: float, y: float) -> None:
        super().__init__(x=x, y=y)

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def length(self) -> float:
        """Евклидова норма: sqrt(x² + y²)."""
        return math.sqrt((self.x * self.x) + (self.y * self.y))

    def normalize(self) -> "Vector2":
        """
        Единичный вектор того же направления: self / length().

        Для нулевого вектора результат — (nan, nan).
        """
        return self.div(self.length())

    def add(self, other: "Vector2") -> "Vector2":
        """self + other (покомпонентно)."""
        return Vector2(self.x + other.x, self.y + other.y)

    def sub(self, other: "Vector2") -> "Vector2":
        """self - other (покомпонентно)."""
        return Vector2(self.x - other.x, self.y - other.y)

    def mul(self, factor: float) -> "Vector2":
        """self * factor."""
        return Vector2(self.x * factor, self.y * factor)

    def div(self, factor: float) -> "Vector2":
        """
        self / factor.

        Деление на ноль даёт ±inf/nan в компонентах (IEEE-754).
        """
        return Vector2(ieee_divide(self.x, factor), ieee_divide(self.y, factor))

    def is_close(
        self,
        other: "Vector2",
        abs_tol: float = EPS_GEOM_COMPARE_ABS,
        rel_tol: float = EPS_GEOM_COMPARE_REL,
    ) -> bool:
        """Покомпонентное сравнение с допуском."""
        return is_close(self.x, other.x, rel_tol, abs_tol) and is_close(
            self.y, other.y, rel_tol, abs_tol
        )

    def to_text(self, config: RenderConfig | None = None) -> str:
        return format_components(self.as_tuple(), config)

    def __add__(self, other: "Vector2") -> "Vector2":
        return self.add(other)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector2":
        return self.mul(factor)

    def __rmul__(self, factor: float) -> "Vector2":
        return self.mul(factor)

    def __truediv__(self, factor: float) -> "Vector2":
        return self.div(factor)

    def __neg__(self) -> "Vector2":
        return Vector2(-self.x, -self.y)

    def __str__(self) -> str:
        return self.to_text()


Vector2.ZERO = Vector2(0.0, 0.0)
Vector2.X = Vector2(1.0, 0.0)
Vector2.Y = Vector2(0.0, 1.0)


# =============================================================================
# VECTOR3
# =============================================================================


class Vector3(BaseModel):
    """
    Трёхмерный вектор.

    Константы: ZERO, X, Y, Z (единичные оси).
    """

    x: float = Field(..., description="Компонента X")
    y: float = Field(..., description="Компонента Y")
    z: float = Field(..., description="Компонента Z")

    model_config = {"frozen": True}

    ZERO: ClassVar["Vector3"]
    X: ClassVar["Vector3"]
    Y: ClassVar["Vector3"]
    Z: ClassVar["Vector3"]

    def __init__(self, x: float, y: float, z: float) -> None:
        super().__init__(x=x, y=y, z=z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)

    def length(self) -> float:
        """Евклидова норма: sqrt(x² + y² + z²)."""
        return math.sqrt((self.x * self.x) + (self.y * self.y) + (self.z * self.z))

    def normalize(self) -> "Vector3":
        """
        Единичный вектор того же направления: self / length().

        Для нулевого вектора результат — (nan, nan, nan).
        """
        return self.div(self.length())

    def add(self, other: "Vector3") -> "Vector3":
        """self + other (покомпонентно)."""
        return Vector3(self.x + other.x, self.y + other.y, self.z + other.z)

    def sub(self, other: "Vector3") -> "Vector3":
        """self - other (покомпонентно)."""
        return Vector3(self.x - other.x, self.y - other.y, self.z - other.z)

    def mul(self, factor: float) -> "Vector3":
        """self * factor."""
        return Vector3(self.x * factor, self.y * factor, self.z * factor)

    def div(self, factor: float) -> "Vector3":
        """
        self / factor.

        Деление на ноль даёт ±inf/nan в компонентах (IEEE-754).
        """
        return Vector3(
            ieee_divide(self.x, factor),
            ieee_divide(self.y, factor),
            ieee_divide(self.z, factor),
        )

    def cross(self, other: "Vector3") -> "Vector3":
        """
        Векторное произведение self × other (правая тройка).

        Формула:
            (y·oz − z·oy, z·ox − x·oz, x·oy − y·ox)

        Returns:
            Вектор, перпендикулярный обоим операндам
        """
        rx = (self.y * other.z) - (self.z * other.y)
        ry = (self.z * other.x) - (self.x * other.z)
        rz = (self.x * other.y) - (self.y * other.x)
        return Vector3(rx, ry, rz)

    def dot(self, other: "Vector3") -> float:
        """Скалярное произведение self · other."""
        return (self.x * other.x) + (self.y * other.y) + (self.z * other.z)

    def is_close(
        self,
        other: "Vector3",
        abs_tol: float = EPS_GEOM_COMPARE_ABS,
        rel_tol: float = EPS_GEOM_COMPARE_REL,
    ) -> bool:
        """Покомпонентное сравнение с допуском."""
        return all(
            is_close(a, b, rel_tol, abs_tol)
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    def to_text(self, config: RenderConfig | None = None) -> str:
        return format_components(self.as_tuple(), config)

    def __add__(self, other: "Vector3") -> "Vector3":
        return self.add(other)

    def __sub__(self, other: "Vector3") -> "Vector3":
        return self.sub(other)

    def __mul__(self, factor: float) -> "Vector3":
        return self.mul(factor)

    def __rmul__(self, factor: float) -> "Vector3":
        return self.mul(factor)

    def __truediv__(self, factor: float) -> "Vector3":
        return self.div(factor)

    def __neg__(self) -> "Vector3":
        return Vector3(-self.x, -self.y, -self.z)

    def __str__(self) -> str:
        return self.to_text()


Vector3.ZERO = Vector3(0.0, 0.0, 0.0)
Vector3.X = Vector3(1.0, 0.0, 0.0)
Vector3.Y = Vector3(0.0, 1.0, 0.0)
Vector3.Z = Vector3(0.0, 0.0, 1.0)
