import math
from collections import Counter, namedtuple

import pytest

import constants as C
from baseline import naive_search
from quadtree import Point, QuadTree, Rectangle, create_quad_tree, world_boundary


def coords(points):
    return sorted((p.x, p.y) for p in points)


def test_points_stay_in_root_until_capacity(small_tree):
    for i in range(1, 5):
        assert small_tree.insert(Point(i, i))

    assert small_tree.is_leaf()
    assert len(small_tree.points) == 4
    assert coords(small_tree.search(Rectangle(0, 0, 10, 10))) == [(1, 1), (2, 2), (3, 3), (4, 4)]


def test_fifth_point_subdivides_root(small_tree):
    for i in range(1, 6):
        assert small_tree.insert(Point(i, i))

    assert small_tree.divided
    assert small_tree.points == []
    assert len(small_tree) == 5
    assert coords(small_tree.search(Rectangle(0, 0, 10, 10))) == [(1, 1), (2, 2), (3, 3), (4, 4), (5, 5)]
    assert small_tree.search(Rectangle(50, 50, 100, 100)) == []


def test_one_point_over_capacity_subdivides_exactly_once(small_tree):
    spread = [Point(10, 10), Point(60, 10), Point(10, 60), Point(60, 60)]
    small_tree.insert_many(spread)
    assert small_tree.node_count() == 1

    small_tree.insert(Point(70, 70))

    assert small_tree.node_count() == 5
    assert small_tree.points == []
    assert all(child.is_leaf() for child in small_tree.children())
    assert len(small_tree.bottom_right.points) == 2


def test_point_outside_region_is_rejected(small_tree):
    assert not small_tree.insert(Point(150, 150))
    assert not small_tree.insert(Point(-1, 50))
    assert len(small_tree) == 0
    assert small_tree.search(Rectangle(-1000, -1000, 1000, 1000)) == []


def test_rejected_point_never_shows_up_after_subdivision(small_tree):
    small_tree.insert_many(Point(i * 9, i * 9) for i in range(1, 11))
    assert not small_tree.insert(Point(150, 150))
    found = small_tree.search(Rectangle(0, 0, 200, 200))
    assert (150, 150) not in coords(found)
    assert len(found) == 10


def test_not_finite_points_are_rejected(small_tree):
    assert not small_tree.insert(Point(math.nan, 1))
    assert not small_tree.insert(Point(1, math.inf))


def test_root_edges_are_inclusive(small_tree):
    corners = [Point(0, 0), Point(100, 0), Point(0, 100), Point(100, 100)]
    for p in corners:
        assert small_tree.insert(p)
    small_tree.insert(Point(50, 50))

    assert small_tree.divided
    assert coords(small_tree.search(world_boundary())) == coords(corners + [Point(50, 50)])


def test_point_on_shared_edge_is_stored_once(small_tree):
    small_tree.insert_many([Point(10, 10), Point(90, 10), Point(10, 90), Point(90, 90), Point(50, 50)])

    holders = [child for child in small_tree.children() if Point(50, 50) in child.points]
    assert holders == [small_tree.bottom_right]
    assert len(small_tree.search(Rectangle(40, 40, 60, 60))) == 1


def test_children_partition_the_parent(small_tree):
    assert small_tree.subdivide()
    parent = small_tree.boundary
    samples = [Point(x, y) for x in (0, 25, 49.999, 50, 50.001, 75, 100)
               for y in (0, 25, 49.999, 50, 50.001, 75, 100)]
    for p in samples:
        owners = [child for child in small_tree.children() if child.boundary.contains(p)]
        assert len(owners) == (1 if parent.contains(p) else 0)

    tl, tr, bl, br = small_tree.children()
    assert (tl.boundary.x1, tl.boundary.y1, tl.boundary.x2, tl.boundary.y2) == (0, 0, 50, 50)
    assert (br.boundary.x1, br.boundary.y1, br.boundary.x2, br.boundary.y2) == (50, 50, 100, 100)
    assert br.boundary.closed_x and br.boundary.closed_y
    assert not tl.boundary.closed_x and not tl.boundary.closed_y
    assert tr.boundary.closed_x and not tr.boundary.closed_y
    assert not bl.boundary.closed_x and bl.boundary.closed_y


def test_subdivide_is_one_time(small_tree):
    assert small_tree.subdivide()
    first_children = small_tree.children()
    assert not small_tree.subdivide()
    assert small_tree.children() == first_children


def test_children_inherit_capacity_and_depth(world):
    tree = create_quad_tree(world, capacity=3)
    tree.subdivide()
    for child in tree.children():
        assert child.capacity == 3
        assert child.depth == 1


def test_every_point_lies_within_its_nodes(small_tree):
    small_tree.insert_many(Point((i * 37) % 101, (i * 53) % 101) for i in range(300))

    for node in small_tree.iter_nodes():
        assert all(node.boundary.contains(p) for p in node)
        if node.divided:
            assert node.points == []
        else:
            assert len(node.points) <= node.capacity


def test_search_matches_naive_scan(small_tree):
    points = [Point((i * 37) % 101, (i * 53) % 101) for i in range(500)]
    small_tree.insert_many(points)
    query = Rectangle(12.5, 30, 61, 77)

    found = small_tree.search(query)

    assert Counter(found) == Counter(naive_search(points, query))


def test_search_is_repeatable(small_tree):
    small_tree.insert_many(Point(i % 97, (i * 7) % 89) for i in range(200))
    query = Rectangle(20, 20, 40, 60)
    assert Counter(small_tree.search(query)) == Counter(small_tree.search(query))
    assert len(small_tree) == 200


def test_duplicate_coordinates_are_kept(small_tree):
    for _ in range(3):
        small_tree.insert(Point(7, 7))
    assert coords(small_tree.search(Rectangle(0, 0, 10, 10))) == [(7, 7)] * 3


def test_coincident_points_stop_at_depth_limit(world):
    tree = create_quad_tree(world, capacity=2)
    for _ in range(50):
        assert tree.insert(Point(1, 1))

    assert len(tree.search(Rectangle(0, 0, 2, 2))) == 50
    assert tree.max_depth() <= C.QUADTREE_MAX_DEPTH


def test_zero_width_region_never_subdivides():
    tree = create_quad_tree(Rectangle(5, 0, 5, 10), capacity=2)
    for y in range(10):
        assert tree.insert(Point(5, y))

    assert not tree.can_subdivide()
    assert not tree.subdivide()
    assert tree.is_leaf()
    assert len(tree.search(Rectangle(0, 0, 10, 10))) == 10


def test_query_appends_to_given_list(small_tree):
    small_tree.insert(Point(1, 1))
    found = ["sentinel"]
    assert small_tree.query(Rectangle(0, 0, 2, 2), found) is found
    assert found == ["sentinel", Point(1, 1)]


def test_non_intersecting_query_prunes_everything(small_tree):
    small_tree.insert_many(Point(i, i) for i in range(20))
    assert small_tree.search(Rectangle(200, 200, 300, 300)) == []


def test_stores_any_object_with_coordinates(small_tree):
    Shop = namedtuple("Shop", ["name", "x", "y"])
    bar = Shop("bar", 12.0, 40.0)
    assert small_tree.insert(bar)
    assert small_tree.search(Rectangle(10, 30, 20, 50)) == [bar]


def test_iteration_and_introspection(small_tree):
    points = [Point(i * 3, i * 2) for i in range(30)]
    small_tree.insert_many(points)
    assert Counter(small_tree) == Counter(points)
    assert small_tree.max_depth() >= 1
    assert small_tree.node_count() == len(list(small_tree.iter_nodes()))
    assert "internal" in repr(small_tree)


def test_insert_many_counts_only_stored_points(small_tree):
    assert small_tree.insert_many([Point(1, 1), Point(500, 1), Point(2, 2)]) == 2


def test_default_capacity_comes_from_configuration(world):
    assert create_quad_tree(world).capacity == C.QUADTREE_CAPACITY


def test_invalid_construction(world):
    with pytest.raises(ValueError):
        QuadTree(world, capacity=0)
    with pytest.raises(ValueError):
        create_quad_tree(Rectangle(0, 0, math.inf, 10))
