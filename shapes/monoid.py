from __future__ import annotations

from typing import Iterable

from .geometry import Shape, Union, Intersection, EMPTY, UNIVERSE


class ShapeMonoid:
    """
    Identity element plus an associative combine over shapes.
    """
    def identity(self) -> Shape:
        raise NotImplementedError

    def combine(self, a: Shape, b: Shape) -> Shape:
        raise NotImplementedError

    def concat_all(self, shapes: Iterable[Shape]) -> Shape:
        """
        Left fold starting from identity(), in iteration order.
        """
        acc = self.identity()
        for s in shapes:
            acc = self.combine(acc, s)
        return acc


class UnionMonoid(ShapeMonoid):
    def identity(self) -> Shape:
        return EMPTY

    def combine(self, a: Shape, b: Shape) -> Shape:
        return Union(a, b)


class IntersectionMonoid(ShapeMonoid):
    def identity(self) -> Shape:
        return UNIVERSE

    def combine(self, a: Shape, b: Shape) -> Shape:
        return Intersection(a, b)


MONOID_UNION = UnionMonoid()
MONOID_INTERSECTION = IntersectionMonoid()


def concat_all(monoid: ShapeMonoid, shapes: Iterable[Shape]) -> Shape:
    return monoid.concat_all(shapes)
