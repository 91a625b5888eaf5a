"""geom-vector — immutable 2D float32 vector value type.

Building block for geometry and graphics code: constructors, arithmetic
operators, geometric queries and tolerance-based equality.

Public API::

    from geom_vector import Vector, FLOAT_LIMIT
"""

from .vector import FLOAT_LIMIT, Vector

__version__ = "0.1.0"
__all__ = [
    "FLOAT_LIMIT",
    "Vector",
]
