"""
Matrix: generic dense row-major matrix.

Holds rows*columns elements of any type supporting +, - and *, plus a
default value obtained from an element factory (int, float, Fraction,
Decimal, complex, ...). Immutable after construction; every operation
returns a new Matrix.

Construction:
    Matrix.from_data([[1, 2], [3, 4]])
    Matrix.from_constant((3, 3), 1)
    Matrix.default_from_dimension((2, 3), element_type=int)
    Matrix.default_from_rows_and_columns(2, 3, element_type=int)
    Matrix.diagonal_from_constant((3, 3), 1.0)
    Matrix.default_diagonal((3, 3))
    Matrix.identity(3)
    Matrix.from_numpy(array)
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Any, Iterator, Sequence

from numpy.typing import ArrayLike, NDArray

from genmatrix.core.exceptions import ShapeError, ValidationError
from genmatrix.core.protocols import ElementFactory
from genmatrix.core.tolerances import ToleranceTier, select_tolerance, within_tolerance
from genmatrix.core.validation import (
    check_axis_index,
    check_count,
    check_dimension,
    check_element,
    check_index,
    check_inner_dimensions,
    check_rectangular,
    check_same_shape,
)
from genmatrix.dense import _kernels
from genmatrix.dense._formatting import matrix_str
from genmatrix.dense._interop import array_to_rows, rows_to_array

# Shape of Matrix.default(), the zero-argument construction
DEFAULT_DIMENSION = (3, 3)


def _check_factory(element_type: Any) -> ElementFactory:
    if not callable(element_type):
        raise ValidationError(
            f"element_type: expected a zero-argument callable, got {element_type!r}"
        )
    return element_type


@dataclass(frozen=True, eq=False, repr=False)
class Matrix:
    """
    Dense rows x columns matrix stored as a flat row-major tuple.

    Construct via factory classmethods, not directly.

    Zero rows or zero columns are allowed and give an empty matrix;
    negative or non-integer dimensions raise InvalidDimensionError.

    Operators:
        A + B, A - B    element-wise, shapes must be equal
        A * B, A @ B    matrix product, A.columns must equal B.rows
        A == B          same shape and element-wise equal
    """
    _rows: int
    _columns: int
    _data: tuple[Any, ...]
    _element_type: ElementFactory

    def __post_init__(self) -> None:
        check_count(self._rows, "rows")
        check_count(self._columns, "columns")
        object.__setattr__(self, "_data", tuple(self._data))
        _check_factory(self._element_type)
        if len(self._data) != self._rows * self._columns:
            raise ShapeError(
                f"data: expected {self._rows * self._columns} elements for a "
                f"{self._rows}x{self._columns} matrix, got {len(self._data)}"
            )

    # --- Constructors ---

    @classmethod
    def from_data(
        cls,
        data: Sequence[Sequence[Any]],
        element_type: ElementFactory | None = None,
    ) -> Matrix:
        """
        Build a matrix from nested rows.

        Parameters
        ----------
        data : sequence of sequences
            Outer sequence holds rows, inner sequences hold that row's
            entries. An empty outer sequence gives a 0x0 matrix.
        element_type : callable, optional
            Factory for the default value. Inferred as type(data[0][0]),
            or float when there are no elements.

        Raises
        ------
        ShapeError
            If rows have different lengths.
        ValidationError
            If data is not nested sequences or an entry lacks +, - or *.
        """
        rows, columns = check_rectangular(data, "data")
        for i, row in enumerate(data):
            for j, value in enumerate(row):
                check_element(value, f"data[{i}][{j}]")

        if element_type is None:
            element_type = type(data[0][0]) if rows and columns else float
        return cls(rows, columns, _kernels.flatten(data), _check_factory(element_type))

    @classmethod
    def from_constant(
        cls,
        dimension: tuple[int, int],
        constant: Any,
        element_type: ElementFactory | None = None,
    ) -> Matrix:
        """
        Matrix of the given dimension with every entry a copy of constant.

        element_type defaults to type(constant); pass a factory when that
        type has no zero-argument constructor.
        """
        rows, columns = check_dimension(dimension)
        check_element(constant, "constant")
        element_type = _check_factory(type(constant) if element_type is None else element_type)
        return cls(rows, columns, _kernels.fill(rows, columns, constant), element_type)

    @classmethod
    def default_from_dimension(
        cls,
        dimension: tuple[int, int],
        element_type: ElementFactory = float,
    ) -> Matrix:
        """Matrix of the given dimension filled with element_type()."""
        rows, columns = check_dimension(dimension)
        element_type = _check_factory(element_type)
        return cls(
            rows, columns, _kernels.fill_default(rows, columns, element_type), element_type
        )

    @classmethod
    def default_from_rows_and_columns(
        cls,
        rows: int,
        columns: int,
        element_type: ElementFactory = float,
    ) -> Matrix:
        """Same as default_from_dimension, taking rows and columns separately."""
        check_count(rows, "rows")
        check_count(columns, "columns")
        return cls.default_from_dimension((rows, columns), element_type)

    @classmethod
    def diagonal_from_constant(
        cls,
        dimension: tuple[int, int],
        constant: Any,
        element_type: ElementFactory | None = None,
    ) -> Matrix:
        """
        Diagonal matrix: copies of constant at (i, i) for i < min(rows, columns).

        Off-diagonal entries are element_type(), which defaults to
        type(constant)(). Non-square dimensions are allowed; the diagonal
        stops at the shorter side.
        """
        rows, columns = check_dimension(dimension)
        check_element(constant, "constant")
        element_type = _check_factory(type(constant) if element_type is None else element_type)
        return cls(
            rows,
            columns,
            _kernels.diagonal(rows, columns, constant, element_type),
            element_type,
        )

    @classmethod
    def default_diagonal(
        cls,
        dimension: tuple[int, int],
        element_type: ElementFactory = float,
    ) -> Matrix:
        """
        Diagonal matrix whose diagonal value is element_type().

        Since the diagonal and off-diagonal values are both the default,
        the result equals default_from_dimension(dimension, element_type).
        For a unit diagonal use identity() or diagonal_from_constant().
        """
        rows, columns = check_dimension(dimension)
        element_type = _check_factory(element_type)
        return cls(
            rows,
            columns,
            _kernels.diagonal(rows, columns, element_type(), element_type),
            element_type,
        )

    @classmethod
    def identity(
        cls,
        size: int,
        one: Any = 1,
        element_type: ElementFactory | None = None,
    ) -> Matrix:
        """size x size matrix with one on the diagonal."""
        check_count(size, "size")
        return cls.diagonal_from_constant((size, size), one, element_type)

    @classmethod
    def default(cls, element_type: ElementFactory = float) -> Matrix:
        """3x3 matrix of default values."""
        return cls.default_from_dimension(DEFAULT_DIMENSION, element_type)

    @classmethod
    def from_numpy(cls, array: ArrayLike) -> Matrix:
        """
        Build a matrix from a 2D numpy array.

        Elements become Python scalars via ndarray.tolist(). Empty arrays
        keep their shape, with element_type float.
        """
        rows, shape = array_to_rows(array, "array")
        if shape[0] == 0 or shape[1] == 0:
            return cls.default_from_dimension(shape)
        return cls.from_data(rows)

    # --- Shape ---

    @property
    def rows(self) -> int:
        """Number of rows."""
        return self._rows

    @property
    def columns(self) -> int:
        """Number of columns."""
        return self._columns

    @property
    def shape(self) -> tuple[int, int]:
        """(rows, columns)."""
        return (self._rows, self._columns)

    @property
    def dimension(self) -> tuple[int, int]:
        """Alias of shape."""
        return self.shape

    @property
    def element_type(self) -> ElementFactory:
        """Factory for this matrix's default value."""
        return self._element_type

    @property
    def is_square(self) -> bool:
        return self._rows == self._columns

    @property
    def is_empty(self) -> bool:
        return self._rows == 0 or self._columns == 0

    # --- Element access ---

    def get(self, i: int, j: int) -> Any:
        """
        Entry at row i, column j.

        Raises IndexOutOfBoundsError if i >= rows, j >= columns, or either
        is negative.
        """
        i, j = check_index((i, j), self.shape)
        return self._data[i * self._columns + j]

    def __getitem__(self, key: tuple[int, int]) -> Any:
        i, j = check_index(key, self.shape)
        return self._data[i * self._columns + j]

    def row(self, i: int) -> tuple[Any, ...]:
        """Row i as a tuple."""
        i = check_axis_index(i, self._rows, "row", self.shape)
        start = i * self._columns
        return self._data[start:start + self._columns]

    def column(self, j: int) -> tuple[Any, ...]:
        """Column j as a tuple."""
        j = check_axis_index(j, self._columns, "column", self.shape)
        return self._data[j::self._columns]

    def iter_rows(self) -> Iterator[tuple[Any, ...]]:
        for i in range(self._rows):
            start = i * self._columns
            yield self._data[start:start + self._columns]

    def to_list(self) -> list[list[Any]]:
        """Nested list of rows; a fresh list each call."""
        return [list(r) for r in self.iter_rows()]

    def to_numpy(self) -> NDArray[Any]:
        """ndarray with this matrix's shape. Fraction or Decimal elements give object dtype."""
        return rows_to_array(self.to_list(), self.shape)

    # --- Transposition ---

    def transpose(self) -> Matrix:
        """
        Return the columns x rows transpose.

        result[j, i] == self[i, j]. Defined for every shape, including
        empty ones; the receiver is not modified.
        """
        return Matrix(
            self._columns,
            self._rows,
            _kernels.transpose(self._data, self._rows, self._columns),
            self._element_type,
        )

    @property
    def T(self) -> Matrix:
        """Shorthand for transpose()."""
        return self.transpose()

    # --- Arithmetic ---

    def _check_operand(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            raise ValidationError(f"other: expected Matrix, got {type(other).__name__}")
        return other

    def add(self, other: Matrix) -> Matrix:
        """
        Element-wise sum self + other.

        Raises DimensionMismatchError unless both shapes are equal.
        """
        other = self._check_operand(other)
        check_same_shape(self.shape, other.shape, "add")
        return Matrix(
            self._rows,
            self._columns,
            _kernels.add(self._data, other._data),
            self._element_type,
        )

    def subtract(self, other: Matrix) -> Matrix:
        """
        Element-wise difference self - other.

        Raises DimensionMismatchError unless both shapes are equal.
        """
        other = self._check_operand(other)
        check_same_shape(self.shape, other.shape, "subtract")
        return Matrix(
            self._rows,
            self._columns,
            _kernels.subtract(self._data, other._data),
            self._element_type,
        )

    def multiply(self, other: Matrix) -> Matrix:
        """
        Matrix product self * other.

        For self (r x n) and other (n x c) returns r x c with
        result[i, j] = default + sum(self[i, k] * other[k, j] for k < n),
        where default is self.element_type(). Uses the naive O(r*n*c)
        triple loop.

        Raises DimensionMismatchError if self.columns != other.rows.
        """
        other = self._check_operand(other)
        check_inner_dimensions(self.shape, other.shape, "multiply")
        return Matrix(
            self._rows,
            other._columns,
            _kernels.matmul(
                self._data,
                other._data,
                self._rows,
                self._columns,
                other._columns,
                self._element_type,
            ),
            self._element_type,
        )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.multiply(other)

    __matmul__ = __mul__

    # --- Comparison ---

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and self._data == other._data

    def allclose(self, other: Matrix, tier: ToleranceTier | None = None) -> bool:
        """
        Element-wise approximate equality.

        Each pair must satisfy |a - b| <= atol + rtol * |b|. With tier=None
        the tier is chosen from the type of this matrix's entries: exact
        for int, Fraction, Decimal and non-numeric element types. A tier
        with zero rtol and atol compares with ==. Decimal entries work with
        any tier.

        Raises DimensionMismatchError if the shapes differ.
        """
        other = self._check_operand(other)
        check_same_shape(self.shape, other.shape, "allclose")
        if tier is None:
            tier = select_tolerance(type(self._data[0]) if self._data else self._element_type)
        return all(
            within_tolerance(a, b, tier)
            for a, b in zip(self._data, other._data)
        )

    # --- Copying ---

    def copy(self) -> Matrix:
        """Independent matrix with copies of every element."""
        return Matrix(
            self._rows,
            self._columns,
            tuple(copy.copy(x) for x in self._data),
            self._element_type,
        )

    __copy__ = copy

    # --- Rendering ---

    def __repr__(self) -> str:
        return f"Matrix(rows={self._rows}, columns={self._columns}, data={self.to_list()!r})"

    def __str__(self) -> str:
        return matrix_str(self)
