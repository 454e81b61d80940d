"""
Geometry Errors — исключения геометрического ядра

Ядро почти не бросает исключений: вырожденная арифметика (деление на ноль,
нормализация нулевого вектора) распространяет inf/nan по правилам IEEE-754.
Исключения возникают только в явно строгих операциях:

- Matrix2/Matrix3.require_inv() → SingularMatrixError
- OrientedPlane.orthonormal() → NonOrthogonalBasisError

Нарушение обязательных полей (например, отсутствующий конец отрезка)
сообщается pydantic.ValidationError при конструировании.
"""


class GeometryError(Exception):
    """Базовое исключение геометрического ядра."""

    pass


class SingularMatrixError(GeometryError):
    """
    Матрица вырождена (det == 0), обратной матрицы не существует.

    Бросается только строгим require_inv(); inv() в этом случае возвращает None.
    """

    def __init__(self, det: float, matrix_name: str = "matrix"):
        self.det = det
        super().__init__(
            f"{matrix_name} is singular (det={det!r}), inverse does not exist"
        )


class NonOrthogonalBasisError(GeometryError):
    """
    Направляющие векторы плоскости не ортогональны.

    Бросается только строгим конструктором OrientedPlane.orthonormal();
    обычный конструктор такие векторы принимает без проверки.
    """

    def __init__(self, dot: float, abs_tol: float):
        self.dot = dot
        self.abs_tol = abs_tol
        super().__init__(
            f"Spanning vectors are not orthogonal: |horiz . vert|={abs(dot):.12e} "
            f"exceeds tolerance {abs_tol:.3e}"
        )
