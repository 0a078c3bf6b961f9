"""
Three-dimensional value types for physical quantities.

A `Vector` has three components; a `SymmetricDyad` has the six independent
components of a symmetric rank-2 tensor; a `Dyad` has all nine components of a
general rank-2 tensor. All of them store components in a numpy array, which
preserves the floating-point type of the input.
"""

import numbers
import typing

import numpy

from phq.core import iterables
from phq.core import text


Instance = typing.TypeVar('Instance', bound='Components')


def _as_components(values: typing.Iterable, size: int) -> numpy.ndarray:
    """Create a one-dimensional floating-point array of `size` elements."""
    array = numpy.array(values)
    if array.shape != (size,):
        raise ValueError(
            f"Expected {size} components but got shape {array.shape}"
        ) from None
    if not numpy.issubdtype(array.dtype, numpy.floating):
        array = array.astype(numpy.float64)
    return array


class Components(iterables.ReprStrMixin):
    """Base class for value types with named components."""

    _names: typing.Tuple[str, ...] = ()
    _rows: typing.Tuple[int, ...] = ()

    __hash__ = None

    def __init__(self, *components) -> None:
        self._data = _as_components(components, len(self._names))

    @classmethod
    def from_array(cls: typing.Type[Instance], array) -> Instance:
        """Create an instance from a one-dimensional array of components."""
        new = cls.__new__(cls)
        new._data = _as_components(array, len(cls._names))
        return new

    @property
    def components(self) -> numpy.ndarray:
        """A read-only view of the components, in canonical order."""
        view = self._data.view()
        view.flags.writeable = False
        return view

    @property
    def dtype(self) -> numpy.dtype:
        """The floating-point type of the components."""
        return self._data.dtype

    def __getattr__(self, name: str):
        names = type(self)._names
        if name in names:
            return self._data[names.index(name)]
        raise AttributeError(
            f"{self.__class__.__qualname__!r} has no attribute {name!r}"
        ) from None

    def __eq__(self, other) -> bool:
        if type(other) is type(self):
            return bool(numpy.array_equal(self._data, other._data))
        return NotImplemented

    def __add__(self, other):
        if type(other) is type(self):
            return self.from_array(self._data + other._data)
        return NotImplemented

    def __sub__(self, other):
        if type(other) is type(self):
            return self.from_array(self._data - other._data)
        return NotImplemented

    def __neg__(self):
        return self.from_array(-self._data)

    def __mul__(self, other):
        if isinstance(other, numbers.Real):
            return self.from_array(self._data * other)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other):
        if isinstance(other, numbers.Real):
            return self.from_array(self._data / other)
        return NotImplemented

    def _printed(self, precision: text.Precision=None) -> typing.List[str]:
        return [text.print_number(v, precision) for v in self._data]

    def print(self, precision: text.Precision=None) -> str:
        """Render the components in parentheses, with rows separated by ';'."""
        printed = self._printed(precision)
        rows, start = [], 0
        for size in self._rows:
            rows.append(', '.join(printed[start:start + size]))
            start += size
        return f"({'; '.join(rows)})"

    def json(self, precision: text.Precision=None) -> str:
        """Render the components as a JSON object."""
        pairs = zip(self._names, self._printed(precision))
        entries = ','.join(f'"{k}":{v}' for k, v in pairs)
        return f"{{{entries}}}"

    def xml(self, precision: text.Precision=None) -> str:
        """Render the components as XML elements."""
        pairs = zip(self._names, self._printed(precision))
        return ''.join(f"<{k}>{v}</{k}>" for k, v in pairs)

    def yaml(self, precision: text.Precision=None) -> str:
        """Render the components as a YAML flow mapping."""
        pairs = zip(self._names, self._printed(precision))
        entries = ','.join(f"{k}:{v}" for k, v in pairs)
        return f"{{{entries}}}"

    def __str__(self) -> str:
        return self.print()


class Vector(Components):
    """A three-dimensional vector.

    Examples
    --------
    >>> v = values.Vector(3.0, 4.0, 0.0)
    >>> v.magnitude()
    5.0
    >>> v.print()
    '(3.00000000000000000, 4.00000000000000000, 0)'
    """

    _names = ('x', 'y', 'z')
    _rows = (3,)

    def __init__(self, x, y, z) -> None:
        super().__init__(x, y, z)

    def magnitude(self):
        """The Euclidean norm of this vector."""
        return numpy.sqrt(numpy.dot(self._data, self._data))

    def dot(self, other: 'Vector'):
        """The scalar product of this vector with `other`."""
        return numpy.dot(self._data, other._data)

    def cross(self, other: 'Vector') -> 'Vector':
        """The vector product of this vector with `other`."""
        return self.from_array(numpy.cross(self._data, other._data))


class _Matrix(Components):
    """Shared behavior of rank-2 tensors."""

    _indices: typing.Tuple[int, ...] = ()

    def matrix(self) -> numpy.ndarray:
        """The full 3x3 matrix of components."""
        return self._data[list(self._indices)].reshape(3, 3)

    def trace(self):
        """The sum of the diagonal components."""
        return numpy.trace(self.matrix())

    def determinant(self):
        """The determinant of the component matrix."""
        (a, b, c), (d, e, f), (g, h, i) = self.matrix()
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def dot(self, vector: Vector) -> Vector:
        """The product of this tensor with `vector`."""
        return Vector.from_array(self.matrix() @ vector._data)


class SymmetricDyad(_Matrix):
    """A symmetric rank-2 tensor, defined by its upper triangle."""

    _names = ('xx', 'xy', 'xz', 'yy', 'yz', 'zz')
    _rows = (3, 2, 1)
    _indices = (0, 1, 2, 1, 3, 4, 2, 4, 5)

    def __init__(self, xx, xy, xz, yy, yz, zz) -> None:
        super().__init__(xx, xy, xz, yy, yz, zz)

    def __getattr__(self, name: str):
        mirrored = {'yx': 'xy', 'zx': 'xz', 'zy': 'yz'}
        return super().__getattr__(mirrored.get(name, name))


class Dyad(_Matrix):
    """A general rank-2 tensor."""

    _names = ('xx', 'xy', 'xz', 'yx', 'yy', 'yz', 'zx', 'zy', 'zz')
    _rows = (3, 3, 3)
    _indices = tuple(range(9))

    def __init__(self, xx, xy, xz, yx, yy, yz, zx, zy, zz) -> None:
        super().__init__(xx, xy, xz, yx, yy, yz, zx, zy, zz)

    def transpose(self) -> 'Dyad':
        """The transpose of this tensor."""
        return self.from_array(self.matrix().T.ravel())

