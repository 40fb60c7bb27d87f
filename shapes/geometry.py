from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List, Optional
import math
import numpy as np


@dataclass(frozen=True)
class Point:
    x: float
    y: float


def distance(p1: Point, p2: Point) -> float:
    """
    Euclidean distance between two points.
    """
    return math.hypot(p1.x - p2.x, p1.y - p2.y)


class Shape:
    """
    A planar region defined only by its membership test.

    Subclasses implement contains(); contains_many() is the batched form used
    by the rasterizer and must agree with contains() point for point.
    """
    def contains(self, point: Point) -> bool:
        raise NotImplementedError

    def __call__(self, point: Point) -> bool:
        return self.contains(point)

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        xs = np.asarray(xs, dtype=float)
        ys = np.asarray(ys, dtype=float)
        out = np.empty(xs.shape, dtype=bool)
        for idx in np.ndindex(xs.shape):
            out[idx] = bool(self.contains(Point(float(xs[idx]), float(ys[idx]))))
        return out

    # ---- Composition DSL ----
    def union(self, other: "Shape") -> "Union":
        return Union(self, other)

    def __or__(self, other: "Shape") -> "Union":
        return self.union(other)

    def intersect(self, other: "Shape") -> "Intersection":
        return Intersection(self, other)

    def __and__(self, other: "Shape") -> "Intersection":
        return self.intersect(other)

    def __invert__(self) -> "Shape":
        return outside(self)


class Empty(Shape):
    def contains(self, point: Point) -> bool:
        return False

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.zeros(np.shape(xs), dtype=bool)

    def __repr__(self) -> str:
        return "EMPTY"


class Universe(Shape):
    def contains(self, point: Point) -> bool:
        return True

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.ones(np.shape(xs), dtype=bool)

    def __repr__(self) -> str:
        return "UNIVERSE"


EMPTY = Empty()
UNIVERSE = Universe()


class Disk(Shape):
    """
    Closed disk: every point within `radius` of `center`.
    A negative radius never matches; NaN anywhere compares false.
    """
    def __init__(self, center: Point, radius: float):
        self.center = center
        self.radius = radius

    def contains(self, point: Point) -> bool:
        return distance(point, self.center) <= self.radius

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        with np.errstate(invalid="ignore", over="ignore"):
            dx = np.asarray(xs, dtype=float) - self.center.x
            dy = np.asarray(ys, dtype=float) - self.center.y
            return np.hypot(dx, dy) <= self.radius

    def __repr__(self) -> str:
        return f"Disk(({self.center.x}, {self.center.y}), {self.radius})"


class Outside(Shape):
    def __init__(self, shape: Shape):
        self.shape = shape

    def contains(self, point: Point) -> bool:
        return not self.shape.contains(point)

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        return np.logical_not(self.shape.contains_many(xs, ys))

    def __repr__(self) -> str:
        return f"Outside({self.shape!r})"


class _Combination(Shape):
    """
    Binary node whose evaluation flattens nested nodes of the same class,
    so a left fold of N shapes is evaluated in a loop instead of N nested calls.
    """
    def __init__(self, a: Shape, b: Shape):
        self.a = a
        self.b = b
        self._flat: Optional[List[Shape]] = None

    def operands(self) -> List[Shape]:
        """
        Leaf operands in left-to-right order, computed once without recursion.
        """
        if self._flat is None:
            kind = type(self)
            flat: List[Shape] = []
            stack: List[Shape] = [self]
            while stack:
                node = stack.pop()
                if type(node) is kind:
                    stack.append(node.b)
                    stack.append(node.a)
                else:
                    flat.append(node)
            self._flat = flat
        return self._flat

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(s) for s in self.operands())})"


class Union(_Combination):
    def contains(self, point: Point) -> bool:
        return any(s.contains(point) for s in self.operands())

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        ops = self.operands()
        acc = np.array(ops[0].contains_many(xs, ys), dtype=bool)
        for s in ops[1:]:
            np.logical_or(acc, s.contains_many(xs, ys), out=acc)
        return acc


class Intersection(_Combination):
    def contains(self, point: Point) -> bool:
        return all(s.contains(point) for s in self.operands())

    def contains_many(self, xs: np.ndarray, ys: np.ndarray) -> np.ndarray:
        ops = self.operands()
        acc = np.array(ops[0].contains_many(xs, ys), dtype=bool)
        for s in ops[1:]:
            np.logical_and(acc, s.contains_many(xs, ys), out=acc)
        return acc


class Predicate(Shape):
    """
    Wraps a plain point -> bool function as a Shape.
    """
    def __init__(self, fn: Callable[[Point], bool]):
        self.fn = fn

    def contains(self, point: Point) -> bool:
        return bool(self.fn(point))


def predicate(fn: Callable[[Point], bool]) -> Shape:
    return Predicate(fn)


def disk(center: Point, radius: float) -> Shape:
    return Disk(center, radius)


def outside(s: Shape) -> Shape:
    # complement of a complement is the original shape
    if isinstance(s, Outside):
        return s.shape
    return Outside(s)


def ring(center: Point, big_radius: float, small_radius: float) -> Shape:
    """
    Annulus between small_radius and big_radius.

    Radii are not validated: small_radius > big_radius gives an empty region
    and a negative small_radius gives the whole big disk.
    """
    # local import: monoid.py builds on this module
    from .monoid import MONOID_INTERSECTION

    return MONOID_INTERSECTION.combine(
        disk(center, big_radius),
        outside(disk(center, small_radius)),
    )


def mickeymouse() -> List[Shape]:
    return [
        disk(Point(200, 200), 100),
        disk(Point(130, 100), 60),
        disk(Point(280, 100), 60),
    ]
