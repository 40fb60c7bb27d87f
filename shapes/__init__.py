# Re-export core geometry API for convenience
from .geometry import (
    Point,
    Shape,
    Disk,
    Outside,
    Union,
    Intersection,
    Predicate,
    EMPTY,
    UNIVERSE,
    distance,
    disk,
    outside,
    predicate,
    ring,
    mickeymouse,
)
from .monoid import (
    ShapeMonoid,
    UnionMonoid,
    IntersectionMonoid,
    MONOID_UNION,
    MONOID_INTERSECTION,
    concat_all,
)
