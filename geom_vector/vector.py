"""2D vector value type for geometry and graphics code.

Vector — immutable pair of float32 components (x, y) with arithmetic
         operators, geometric queries and tolerance-based equality.

Floating-point edge cases (division by zero, reciprocal of a zero component,
normalizing the zero vector) follow IEEE semantics and produce inf / NaN
components instead of raising.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from numbers import Real
from typing import Iterator

import numpy as np

logger = logging.getLogger(__name__)

FLOAT_LIMIT = np.float32(1e-6)  # per-component equality tolerance

# numpy floating-point warnings raised by IEEE edge cases (x/0, inf - inf)
_IEEE_QUIET = {"divide": "ignore", "invalid": "ignore", "over": "ignore"}


def _to_f32(value) -> np.float32:
    """Convert a real number to float32, saturating to +/-inf out of range."""
    with np.errstate(**_IEEE_QUIET):
        try:
            return np.float32(value)
        except OverflowError:
            # ints too large for a double
            return np.float32(np.inf if value > 0 else -np.inf)


@dataclass(frozen=True, eq=False)
class Vector:
    """A point or displacement in the 2D Euclidean plane.

    Components are stored as ``numpy.float32``; anything real passed in is
    coerced on construction. No validation is done: NaN or infinite
    components are the caller's responsibility.

    Equality is approximate: two vectors compare equal when each pair of
    components differs by strictly less than ``FLOAT_LIMIT``. This relation
    is not transitive near the tolerance boundary, so vectors are unhashable.
    """

    x: np.float32
    y: np.float32

    # numpy scalars defer to the reflected operators below
    __array_ufunc__ = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", _to_f32(self.x))
        object.__setattr__(self, "y", _to_f32(self.y))

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def zero(cls) -> "Vector":
        """The zero vector."""
        return cls(0.0, 0.0)

    @classmethod
    def x_axis(cls) -> "Vector":
        """Unit vector along x: (1, 0)."""
        return cls(1.0, 0.0)

    @classmethod
    def y_axis(cls) -> "Vector":
        """Unit vector along y: (0, 1)."""
        return cls(0.0, 1.0)

    @classmethod
    def one(cls) -> "Vector":
        return cls(1.0, 1.0)

    @classmethod
    def of(cls, x: float, y: float) -> "Vector":
        return cls(x, y)

    @classmethod
    def of_int(cls, x: int, y: int) -> "Vector":
        """Build a vector from integer components, converted to float32."""
        return cls(_to_f32(x), _to_f32(y))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def length_squared(self) -> np.float32:
        """Squared length; cheaper than ``length`` for magnitude comparisons."""
        with np.errstate(**_IEEE_QUIET):
            return self.x * self.x + self.y * self.y

    def length(self) -> np.float32:
        return np.sqrt(self.length_squared())

    def dot(self, other: "Vector") -> np.float32:
        with np.errstate(**_IEEE_QUIET):
            return self.x * other.x + self.y * other.y

    def cross(self, other: "Vector") -> np.float32:
        """Scalar 2D cross product.

        Positive when ``other`` lies counter-clockwise of ``self``, negative
        when clockwise, zero when the two are parallel.
        """
        with np.errstate(**_IEEE_QUIET):
            return self.x * other.y - self.y * other.x

    def x_component(self) -> "Vector":
        """Only the x component, as a vector (x, 0)."""
        return Vector(self.x, 0.0)

    def y_component(self) -> "Vector":
        """Only the y component, as a vector (0, y)."""
        return Vector(0.0, self.y)

    def reciprocal(self) -> "Vector":
        """(1/x, 1/y); a zero component yields an infinite one."""
        with np.errstate(**_IEEE_QUIET):
            return Vector(np.float32(1.0) / self.x, np.float32(1.0) / self.y)

    def times(self, other: "Vector") -> "Vector":
        """Component-wise (Hadamard) product."""
        with np.errstate(**_IEEE_QUIET):
            return Vector(self.x * other.x, self.y * other.y)

    def normalized(self) -> "Vector":
        """This vector scaled to unit length.

        The zero vector has no direction; its normalized form has NaN
        components.
        """
        length = self.length()
        if length == 0:
            logger.debug("normalizing zero-length vector %s", self)
        return self / length

    def clamp(self, min_bound: "Vector", max_bound: "Vector") -> "Vector":
        """Clamp each component into ``[min_bound.c, max_bound.c]``.

        Computed as ``max(min_bound, min(max_bound, value))`` per axis, so
        inverted bounds resolve to ``min_bound`` rather than failing.
        """
        return Vector(
            np.fmax(min_bound.x, np.fmin(max_bound.x, self.x)),
            np.fmax(min_bound.y, np.fmin(max_bound.y, self.y)),
        )

    @property
    def np_array(self) -> np.ndarray:
        """Return the components as a fresh numpy float32 array."""
        return np.array([self.x, self.y], dtype=np.float32)

    def __iter__(self) -> Iterator[np.float32]:
        return iter((self.x, self.y))

    # ------------------------------------------------------------------
    # Operators
    # ------------------------------------------------------------------

    def __neg__(self) -> "Vector":
        return Vector(-self.x, -self.y)

    def __add__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        with np.errstate(**_IEEE_QUIET):
            return Vector(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> "Vector":
        if not isinstance(other, Vector):
            return NotImplemented
        return self + (-other)

    def __mul__(self, scalar: object) -> "Vector":
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        s = _to_f32(scalar)
        with np.errstate(**_IEEE_QUIET):
            return Vector(self.x * s, self.y * s)

    def __rmul__(self, scalar: object) -> "Vector":
        return self.__mul__(scalar)

    def __truediv__(self, scalar: object) -> "Vector":
        if isinstance(scalar, bool) or not isinstance(scalar, Real):
            return NotImplemented
        s = _to_f32(scalar)
        with np.errstate(**_IEEE_QUIET):
            return Vector(self.x / s, self.y / s)

    # +=, -=, *= and /= fall back to the operators above and rebind.

    # ------------------------------------------------------------------
    # Comparison & display
    # ------------------------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        with np.errstate(**_IEEE_QUIET):
            return bool(
                abs(self.x - other.x) < FLOAT_LIMIT
                and abs(self.y - other.y) < FLOAT_LIMIT
            )

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"<{self.x!s}, {self.y!s}>"

    def __repr__(self) -> str:
        return f"Vector(x={self.x!s}, y={self.y!s})"
