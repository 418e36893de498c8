#quadtree.py

import math
from collections import namedtuple
import constants as C

# A Point holds (x, y) coordinates, usually a latitude/longitude pair.
# The tree stores anything with .x and .y, so richer records work too.
Point = namedtuple("Point", ["x", "y"])


class Rectangle:
    """
    An axis-aligned rectangle defined by two opposite corners.

    Corners may be given in any order; they are normalized so that
    x1 <= x2 and y1 <= y2. The min edges are always inclusive. The max
    edges are inclusive only when closed_x / closed_y are set, which lets
    sibling cells share an edge without both claiming a point on it.
    """
    __slots__ = ("x1", "y1", "x2", "y2", "closed_x", "closed_y")

    def __init__(self, x1, y1, x2, y2, closed_x=True, closed_y=True):
        if any(math.isnan(v) for v in (x1, y1, x2, y2)):
            raise ValueError(f"Rectangle corners must not be NaN: ({x1}, {y1}), ({x2}, {y2})")
        self.x1 = min(x1, x2)
        self.x2 = max(x1, x2)
        self.y1 = min(y1, y2)
        self.y2 = max(y1, y2)
        self.closed_x = closed_x
        self.closed_y = closed_y

    @property
    def width(self):
        return self.x2 - self.x1

    @property
    def height(self):
        return self.y2 - self.y1

    @property
    def center(self):
        return (self.x1 + self.x2) / 2, (self.y1 + self.y2) / 2

    def is_finite(self):
        return all(math.isfinite(v) for v in (self.x1, self.y1, self.x2, self.y2))

    def contains(self, point):
        """Checks if a point is inside this rectangle."""
        x, y = point.x, point.y
        if not (self.x1 <= x and self.y1 <= y):
            return False
        in_x = x <= self.x2 if self.closed_x else x < self.x2
        in_y = y <= self.y2 if self.closed_y else y < self.y2
        return in_x and in_y

    def intersects(self, range_rect):
        """Checks if another rectangle overlaps this one (touching edges count)."""
        return not (range_rect.x1 > self.x2 or
                    range_rect.x2 < self.x1 or
                    range_rect.y1 > self.y2 or
                    range_rect.y2 < self.y1)

    def __eq__(self, other):
        if not isinstance(other, Rectangle):
            return NotImplemented
        return ((self.x1, self.y1, self.x2, self.y2, self.closed_x, self.closed_y) ==
                (other.x1, other.y1, other.x2, other.y2, other.closed_x, other.closed_y))

    def __hash__(self):
        return hash((self.x1, self.y1, self.x2, self.y2, self.closed_x, self.closed_y))

    def __repr__(self):
        right = "]" if self.closed_x else ")"
        bottom = "]" if self.closed_y else ")"
        return f"Rectangle([{self.x1}, {self.x2}{right} x [{self.y1}, {self.y2}{bottom})"


def contains(region, point):
    return region.contains(point)


def intersects(region_a, region_b):
    return region_a.intersects(region_b)


class QuadTree:
    """
    A point quadtree node. Every node holds up to 'capacity' points; once a
    leaf is full it is subdivided into 4 children and its points are pushed
    down into them. Internal nodes never hold points themselves.
    """
    def __init__(self, boundary, capacity=None, depth=0):
        if capacity is None:
            capacity = C.QUADTREE_CAPACITY
        if capacity < 1:
            raise ValueError(f"Quadtree capacity must be at least 1, got {capacity}")
        if not boundary.is_finite():
            raise ValueError(f"Quadtree boundary must be finite, got {boundary!r}")
        self.boundary = boundary
        self.capacity = capacity
        self.depth = depth
        self.points = []
        self.divided = False
        self.top_left = None
        self.top_right = None
        self.bottom_left = None
        self.bottom_right = None

    def is_leaf(self):
        return not self.divided

    def children(self):
        if not self.divided:
            return ()
        return (self.top_left, self.top_right, self.bottom_left, self.bottom_right)

    def can_subdivide(self):
        """
        A node at the depth limit, or one whose midpoint does not fall strictly
        inside its extent (zero or underflowing width/height), is indivisible
        and keeps its points no matter how many arrive.
        """
        if self.depth >= C.QUADTREE_MAX_DEPTH:
            return False
        b = self.boundary
        mid_x, mid_y = b.center
        return b.x1 < mid_x < b.x2 and b.y1 < mid_y < b.y2

    def subdivide(self):
        """Divides the node into four quadrants and moves its points into them."""
        if self.divided or not self.can_subdivide():
            return False

        b = self.boundary
        mid_x, mid_y = b.center
        depth = self.depth + 1

        # Children share the parent's closure only on the sides they share with it.
        self.top_left = QuadTree(Rectangle(b.x1, b.y1, mid_x, mid_y, False, False), self.capacity, depth)
        self.top_right = QuadTree(Rectangle(mid_x, b.y1, b.x2, mid_y, b.closed_x, False), self.capacity, depth)
        self.bottom_left = QuadTree(Rectangle(b.x1, mid_y, mid_x, b.y2, False, b.closed_y), self.capacity, depth)
        self.bottom_right = QuadTree(Rectangle(mid_x, mid_y, b.x2, b.y2, b.closed_x, b.closed_y), self.capacity, depth)
        self.divided = True

        points = self.points
        self.points = []
        for point in points:
            self._child_for(point).insert(point)
        return True

    def _child_for(self, point):
        # The quadrants partition the boundary, so exactly one of them matches.
        for child in self.children():
            if child.boundary.contains(point):
                return child
        raise AssertionError(f"No quadrant of {self.boundary!r} contains {point!r}")

    def insert(self, point):
        """Inserts a point into the quadtree. Returns False if it lies outside the boundary."""
        if not self.boundary.contains(point):
            return False

        if not self.divided:
            if len(self.points) < self.capacity or not self.subdivide():
                self.points.append(point)
                return True

        return self._child_for(point).insert(point)

    def insert_many(self, points):
        """Inserts every point and returns how many were stored."""
        inserted = 0
        for point in points:
            if self.insert(point):
                inserted += 1
        return inserted

    def query(self, range_rect, found):
        """Appends the points within range_rect to found and returns it."""
        if not self.boundary.intersects(range_rect):
            return found

        for p in self.points:
            if range_rect.contains(p):
                found.append(p)

        if self.divided:
            self.top_left.query(range_rect, found)
            self.top_right.query(range_rect, found)
            self.bottom_left.query(range_rect, found)
            self.bottom_right.query(range_rect, found)

        return found

    def search(self, range_rect):
        """Returns all the points within range_rect, in no particular order."""
        return self.query(range_rect, [])

    def iter_nodes(self):
        """Yields every node of the subtree, parents before children."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.children()))

    def node_count(self):
        return sum(1 for _ in self.iter_nodes())

    def max_depth(self):
        return max(node.depth for node in self.iter_nodes())

    def __iter__(self):
        for node in self.iter_nodes():
            yield from node.points

    def __len__(self):
        return sum(len(node.points) for node in self.iter_nodes())

    def __repr__(self):
        kind = "internal" if self.divided else "leaf"
        return f"QuadTree({self.boundary!r}, {kind}, depth={self.depth}, points={len(self.points)})"


def create_quad_tree(boundary, capacity=None):
    """Creates the root node of a quadtree over a finite boundary."""
    return QuadTree(boundary, capacity)


def world_boundary():
    """The configured indexed area, closed on every side."""
    return Rectangle(C.WORLD_MIN_X, C.WORLD_MIN_Y, C.WORLD_MAX_X, C.WORLD_MAX_Y)
