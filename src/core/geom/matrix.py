"""
Matrix — квадратные матрицы 2×2 и 3×3

Immutable Pydantic модели матриц, хранящих элементы по именам a{row}{col}
(row-major). Операции:
- mul: произведение на вектор, на матрицу (R = M·S) или на скаляр
- det: определитель (2×2 в замкнутой форме, 3×3 разложением по первой строке)
- inv: обратная матрица или None для вырожденной (det == 0)
- transpose: транспонирование
- create_rotation_matrix: матрица поворота, угол в ГРАДУСАХ

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. inv() проверяет det == 0 точно, без epsilon
2. inv() никогда не бросает исключение: вырожденная матрица → None
3. Угол поворота задаётся в градусах и переводится в радианы внутри
4. Ось поворота Matrix3 не проверяется на единичную длину
"""

import logging
import math
from numbers import Real
from typing import ClassVar, Optional, Tuple, Union

from pydantic import BaseModel, Field

from src.core.geom.errors import SingularMatrixError
from src.core.geom.rendering import RenderConfig, format_matrix_rows
from src.core.geom.vector import Vector2, Vector3
from src.core.math.numerical_safeguards import (
    EPS_GEOM_COMPARE_ABS,
    EPS_GEOM_COMPARE_REL,
    ieee_cos,
    ieee_divide,
    ieee_sin,
    is_close,
)

logger = logging.getLogger(__name__)


# =============================================================================
# MATRIX2
# =============================================================================


class Matrix2(BaseModel):
    """
    Матрица 2×2:

        | a00, a01 |
        | a10, a11 |

    Может быть вырожденной; обратная матрица тогда не существует.
    """

    a00: float = Field(..., description="Строка 0, столбец 0")
    a01: float = Field(..., description="Строка 0, столбец 1")
    a10: float = Field(..., description="Строка 1, столбец 0")
    a11: float = Field(..., description="Строка 1, столбец 1")

    model_config = {"frozen": True}

    IDENTITY: ClassVar["Matrix2"]

    def __init__(self, a00: float, a01: float, a10: float, a11: float) -> None:
        super().__init__(a00=a00, a01=a01, a10=a10, a11=a11)

    def rows(self) -> Tuple[Tuple[float, float], Tuple[float, float]]:
        return ((self.a00, self.a01), (self.a10, self.a11))

    def as_tuple(self) -> Tuple[float, ...]:
        """Элементы в порядке row-major."""
        return (self.a00, self.a01, self.a10, self.a11)

    def mul(
        self, other: Union[Vector2, "Matrix2", float]
    ) -> Union[Vector2, "Matrix2"]:
        """
        Произведение с вектором, матрицей или скаляром.

        - Vector2 v: r = M·v
        - Matrix2 S: R = M·S (некоммутативно)
        - скаляр f: каждый элемент умножается на f

        Raises:
            TypeError: Для операнда неподдерживаемого типа
        """
        if isinstance(other, Vector2):
            return self._mul_vector(other)
        if isinstance(other, Matrix2):
            return self._mul_matrix(other)
        if isinstance(other, Real):
            return self._mul_scalar(float(other))
        raise TypeError(f"Cannot multiply Matrix2 by {type(other).__name__}")

    def _mul_vector(self, v: Vector2) -> Vector2:
        r0 = (self.a00 * v.x) + (self.a01 * v.y)
        r1 = (self.a10 * v.x) + (self.a11 * v.y)
        return Vector2(r0, r1)

    def _mul_matrix(self, s: "Matrix2") -> "Matrix2":
        r00 = (self.a00 * s.a00) + (self.a01 * s.a10)
        r01 = (self.a00 * s.a01) + (self.a01 * s.a11)

        r10 = (self.a10 * s.a00) + (self.a11 * s.a10)
        r11 = (self.a10 * s.a01) + (self.a11 * s.a11)

        return Matrix2(r00, r01, r10, r11)

    def _mul_scalar(self, factor: float) -> "Matrix2":
        return Matrix2(
            self.a00 * factor, self.a01 * factor, self.a10 * factor, self.a11 * factor
        )

    def det(self) -> float:
        """Определитель: a00·a11 − a01·a10."""
        return (self.a00 * self.a11) - (self.a01 * self.a10)

    def inv(self) -> Optional["Matrix2"]:
        """
        Обратная матрица M⁻¹.

        Returns:
            Обратная матрица или None, если det == 0 (точное сравнение)
        """
        det = self.det()
        if det == 0:
            logger.debug("Matrix2 is singular (det == 0), no inverse")
            return None

        return Matrix2(self.a11, -self.a01, -self.a10, self.a00)._mul_scalar(
            ieee_divide(1.0, det)
        )

    def require_inv(self) -> "Matrix2":
        """
        Строгий вариант inv().

        Raises:
            SingularMatrixError: Если det == 0
        """
        inverse = self.inv()
        if inverse is None:
            raise SingularMatrixError(self.det(), "Matrix2")
        return inverse

    def transpose(self) -> "Matrix2":
        """Транспонированная матрица Mᵀ."""
        return Matrix2(self.a00, self.a10, self.a01, self.a11)

    @staticmethod
    def create_rotation_matrix(theta: float) -> "Matrix2":
        """
        Матрица поворота на плоскости:

            | cosθ, −sinθ |
            | sinθ,  cosθ |

        Args:
            theta: Угол в градусах; положительный угол — против часовой стрелки

        Returns:
            Матрица поворота
        """
        ct = ieee_cos(math.radians(theta))
        st = ieee_sin(math.radians(theta))

        return Matrix2(ct, -st, st, ct)

    def is_close(
        self,
        other: "Matrix2",
        abs_tol: float = EPS_GEOM_COMPARE_ABS,
        rel_tol: float = EPS_GEOM_COMPARE_REL,
    ) -> bool:
        """Поэлементное сравнение с допуском."""
        return all(
            is_close(a, b, rel_tol, abs_tol)
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    def to_text(self, config: RenderConfig | None = None) -> str:
        return format_matrix_rows(self.rows(), config)

    def __matmul__(self, other: Union[Vector2, "Matrix2"]) -> Union[Vector2, "Matrix2"]:
        if isinstance(other, (Vector2, Matrix2)):
            return self.mul(other)
        return NotImplemented

    def __mul__(self, factor: float) -> "Matrix2":
        if isinstance(factor, Real):
            return self._mul_scalar(float(factor))
        return NotImplemented

    def __rmul__(self, factor: float) -> "Matrix2":
        return self.__mul__(factor)

    def __str__(self) -> str:
        return self.to_text()


Matrix2.IDENTITY = Matrix2(1.0, 0.0, 0.0, 1.0)


# =============================================================================
# MATRIX3
# =============================================================================


class Matrix3(BaseModel):
    """
    Матрица 3×3:

        | a00, a01, a02 |
        | a10, a11, a12 |
        | a20, a21, a22 |
    """

    a00: float = Field(..., description="Строка 0, столбец 0")
    a01: float = Field(..., description="Строка 0, столбец 1")
    a02: float = Field(..., description="Строка 0, столбец 2")
    a10: float = Field(..., description="Строка 1, столбец 0")
    a11: float = Field(..., description="Строка 1, столбец 1")
    a12: float = Field(..., description="Строка 1, столбец 2")
    a20: float = Field(..., description="Строка 2, столбец 0")
    a21: float = Field(..., description="Строка 2, столбец 1")
    a22: float = Field(..., description="Строка 2, столбец 2")

    model_config = {"frozen": True}

    IDENTITY: ClassVar["Matrix3"]

    def __init__(
        self,
        a00: float,
        a01: float,
        a02: float,
        a10: float,
        a11: float,
        a12: float,
        a20: float,
        a21: float,
        a22: float,
    ) -> None:
        super().__init__(
            a00=a00, a01=a01, a02=a02,
            a10=a10, a11=a11, a12=a12,
            a20=a20, a21=a21, a22=a22,
        )

    def rows(self) -> Tuple[Tuple[float, float, float], ...]:
        return (
            (self.a00, self.a01, self.a02),
            (self.a10, self.a11, self.a12),
            (self.a20, self.a21, self.a22),
        )

    def as_tuple(self) -> Tuple[float, ...]:
        """Элементы в порядке row-major."""
        return (
            self.a00, self.a01, self.a02,
            self.a10, self.a11, self.a12,
            self.a20, self.a21, self.a22,
        )

    def mul(
        self, other: Union[Vector3, "Matrix3", float]
    ) -> Union[Vector3, "Matrix3"]:
        """
        Произведение с вектором, матрицей или скаляром.

        - Vector3 v: r = M·v
        - Matrix3 S: R = M·S (некоммутативно)
        - скаляр f: каждый элемент умножается на f

        Raises:
            TypeError: Для операнда неподдерживаемого типа
        """
        if isinstance(other, Vector3):
            return self._mul_vector(other)
        if isinstance(other, Matrix3):
            return self._mul_matrix(other)
        if isinstance(other, Real):
            return self._mul_scalar(float(other))
        raise TypeError(f"Cannot multiply Matrix3 by {type(other).__name__}")

    def _mul_vector(self, v: Vector3) -> Vector3:
        r0 = (self.a00 * v.x) + (self.a01 * v.y) + (self.a02 * v.z)
        r1 = (self.a10 * v.x) + (self.a11 * v.y) + (self.a12 * v.z)
        r2 = (self.a20 * v.x) + (self.a21 * v.y) + (self.a22 * v.z)
        return Vector3(r0, r1, r2)

    def _mul_matrix(self, s: "Matrix3") -> "Matrix3":
        r00 = (self.a00 * s.a00) + (self.a01 * s.a10) + (self.a02 * s.a20)
        r01 = (self.a00 * s.a01) + (self.a01 * s.a11) + (self.a02 * s.a21)
        r02 = (self.a00 * s.a02) + (self.a01 * s.a12) + (self.a02 * s.a22)

        r10 = (self.a10 * s.a00) + (self.a11 * s.a10) + (self.a12 * s.a20)
        r11 = (self.a10 * s.a01) + (self.a11 * s.a11) + (self.a12 * s.a21)
        r12 = (self.a10 * s.a02) + (self.a11 * s.a12) + (self.a12 * s.a22)

        r20 = (self.a20 * s.a00) + (self.a21 * s.a10) + (self.a22 * s.a20)
        r21 = (self.a20 * s.a01) + (self.a21 * s.a11) + (self.a22 * s.a21)
        r22 = (self.a20 * s.a02) + (self.a21 * s.a12) + (self.a22 * s.a22)

        return Matrix3(r00, r01, r02, r10, r11, r12, r20, r21, r22)

    def _mul_scalar(self, factor: float) -> "Matrix3":
        return Matrix3(*(a * factor for a in self.as_tuple()))

    def det(self) -> float:
        """
        Определитель разложением по первой строке:

            a00·(a11·a22 − a12·a21) − a01·(a10·a22 − a12·a20) + a02·(a10·a21 − a11·a20)
        """
        s1 = self.a00 * ((self.a11 * self.a22) - (self.a12 * self.a21))
        s2 = self.a01 * ((self.a10 * self.a22) - (self.a12 * self.a20))
        s3 = self.a02 * ((self.a10 * self.a21) - (self.a11 * self.a20))
        return (s1 - s2) + s3

    def inv(self) -> Optional["Matrix3"]:
        """
        Обратная матрица M⁻¹ через присоединённую (adjugate).

        Алгоритм:
        1. Матрица алгебраических дополнений (миноры со знаком)
        2. Транспонирование → adj(M)
        3. Умножение на 1/det

        Returns:
            Обратная матрица или None, если det == 0 (точное сравнение)
        """
        det = self.det()
        if det == 0:
            logger.debug("Matrix3 is singular (det == 0), no inverse")
            return None

        # Алгебраические дополнения
        s00 = +1 * ((self.a11 * self.a22) - (self.a12 * self.a21))
        s01 = -1 * ((self.a10 * self.a22) - (self.a12 * self.a20))
        s02 = +1 * ((self.a10 * self.a21) - (self.a11 * self.a20))

        s10 = -1 * ((self.a01 * self.a22) - (self.a02 * self.a21))
        s11 = +1 * ((self.a00 * self.a22) - (self.a02 * self.a20))
        s12 = -1 * ((self.a00 * self.a21) - (self.a01 * self.a20))

        s20 = +1 * ((self.a01 * self.a12) - (self.a02 * self.a11))
        s21 = -1 * ((self.a00 * self.a12) - (self.a02 * self.a10))
        s22 = +1 * ((self.a00 * self.a11) - (self.a01 * self.a10))

        cofactors = Matrix3(s00, s01, s02, s10, s11, s12, s20, s21, s22)
        return cofactors.transpose()._mul_scalar(ieee_divide(1.0, det))

    def require_inv(self) -> "Matrix3":
        """
        Строгий вариант inv().

        Raises:
            SingularMatrixError: Если det == 0
        """
        inverse = self.inv()
        if inverse is None:
            raise SingularMatrixError(self.det(), "Matrix3")
        return inverse

    def transpose(self) -> "Matrix3":
        """Транспонированная матрица Mᵀ."""
        return Matrix3(
            self.a00, self.a10, self.a20,
            self.a01, self.a11, self.a21,
            self.a02, self.a12, self.a22,
        )

    @staticmethod
    def create_rotation_matrix(v: Vector3, theta: float) -> "Matrix3":
        """
        Матрица поворота вокруг оси v (формула Родрига).

        Ось должна быть единичной, но это не проверяется: для неединичной оси
        результат — не чистый поворот.

        Args:
            v: Ось поворота
            theta: Угол в градусах; если v направлена на наблюдателя,
                положительный угол поворачивает против часовой стрелки

        Returns:
            Матрица поворота
        """
        ct = ieee_cos(math.radians(theta))
        st = ieee_sin(math.radians(theta))
        omc = 1 - ct

        r00 = ct + (v.x * v.x * omc)
        r01 = (v.x * v.y * omc) - (v.z * st)
        r02 = (v.x * v.z * omc) + (v.y * st)
        r10 = (v.y * v.x * omc) + (v.z * st)
        r11 = ct + (v.y * v.y * omc)
        r12 = (v.y * v.z * omc) - (v.x * st)
        r20 = (v.z * v.x * omc) - (v.y * st)
        r21 = (v.z * v.y * omc) + (v.x * st)
        r22 = ct + (v.z * v.z * omc)

        return Matrix3(r00, r01, r02, r10, r11, r12, r20, r21, r22)

    def is_close(
        self,
        other: "Matrix3",
        abs_tol: float = EPS_GEOM_COMPARE_ABS,
        rel_tol: float = EPS_GEOM_COMPARE_REL,
    ) -> bool:
        """Поэлементное сравнение с допуском."""
        return all(
            is_close(a, b, rel_tol, abs_tol)
            for a, b in zip(self.as_tuple(), other.as_tuple())
        )

    def to_text(self, config: RenderConfig | None = None) -> str:
        return format_matrix_rows(self.rows(), config)

    def __matmul__(self, other: Union[Vector3, "Matrix3"]) -> Union[Vector3, "Matrix3"]:
        if isinstance(other, (Vector3, Matrix3)):
            return self.mul(other)
        return NotImplemented

    def __mul__(self, factor: float) -> "Matrix3":
        if isinstance(factor, Real):
            return self._mul_scalar(float(factor))
        return NotImplemented

    def __rmul__(self, factor: float) -> "Matrix3":
        return self.__mul__(factor)

    def __str__(self) -> str:
        return self.to_text()


Matrix3.IDENTITY = Matrix3(1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
