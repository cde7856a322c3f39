# -*- coding: utf-8 -*-

import networkx as nx
import numpy as np

from mapanalyzer.algorithms.dijkstra import find_path
from mapanalyzer.classes.roadmap import RoadMap


def random_road_map(rng, num_points, num_roads, max_distance=20):
    """
    random road map of points 'p0'..'pn' with unique road ids
    (not necessarily connected)
    """
    ids = rng.permutation(num_roads)
    records = []
    for road_id in ids:
        u, v = rng.integers(0, num_points, 2)
        records.append(('p{}'.format(u), 'p{}'.format(v),
                        int(rng.integers(0, max_distance)), int(road_id)))

    return RoadMap.from_records(records, 'p0', 'p{}'.format(num_points - 1))


def assert_is_walk(path, start, end):
    """ consecutive roads share endpoints from start to end """
    point = start
    for road in path:
        assert point in (road.from_point, road.to_point), \
            "path is not contiguous"
        point = road.other(point)
    assert point == end


def test_simple_route():

    records = [('A', 'B', 5, 1), ('B', 'C', 5, 2), ('A', 'C', 20, 3)]
    road_map = RoadMap.from_records(records, 'A', 'C')

    path, distance = find_path(road_map, 'A', 'C')
    assert [r.id for r in path] == [1, 2]
    assert distance == 10


def test_reversed_endpoints():
    """ road endpoint order doesn't matter for traversal """

    records = [('B', 'A', 4, 1), ('C', 'B', 4, 2)]
    road_map = RoadMap.from_records(records, 'A', 'C')

    path, distance = find_path(road_map, 'A', 'C')
    assert [r.id for r in path] == [1, 2]
    assert distance == 8


def test_tie_prefers_lower_id():
    """
    2 equally long routes to D, the one settled via the lower road id
    wins
    """

    records = [('A', 'B', 3, 4),
               ('A', 'C', 3, 2),
               ('B', 'D', 2, 1),
               ('C', 'D', 2, 3)]
    road_map = RoadMap.from_records(records, 'A', 'D')

    path, distance = find_path(road_map, 'A', 'D')
    assert distance == 5
    # C is popped before B (same distance, lower id) and reaches D 1st
    assert [r.id for r in path] == [2, 3]


def test_parallel_roads():

    records = [('A', 'B', 5, 2), ('A', 'B', 5, 1), ('A', 'B', 3, 9)]
    road_map = RoadMap.from_records(records, 'A', 'B')

    path, distance = find_path(road_map, 'A', 'B')
    assert [r.id for r in path] == [9]
    assert distance == 3


def test_same_start_and_end():

    records = [('A', 'B', 5, 1)]
    road_map = RoadMap.from_records(records, 'A', 'A')
    assert find_path(road_map, 'A', 'A') == ([], 0)


def test_unreachable_end():

    records = [('A', 'B', 5, 1), ('C', 'D', 1, 2)]
    road_map = RoadMap.from_records(records, 'A', 'D')
    assert find_path(road_map, 'A', 'D') == ([], 0)

    # end that isn't on the map at all
    assert find_path(road_map, 'A', 'Z') == ([], 0)
    # neither is the start
    assert find_path(road_map, 'Z', 'A') == ([], 0)


def test_self_loop_and_zero_distance():

    records = [('A', 'A', 0, 1), ('A', 'B', 0, 2), ('B', 'C', 4, 3)]
    road_map = RoadMap.from_records(records, 'A', 'C')

    path, distance = find_path(road_map, 'A', 'C')
    assert [r.id for r in path] == [2, 3]
    assert distance == 4


def test_against_networkx():
    """
    distance matches networkx dijkstra on random maps and the path is
    a real walk whose roads add up to it
    """

    rng = np.random.default_rng(1)
    for _ in range(50):
        road_map = random_road_map(rng, 15, 40)
        start, end = road_map.start, road_map.end
        path, distance = find_path(road_map, start, end)

        if start in road_map and end in road_map and \
                nx.has_path(road_map, start, end):
            expected = nx.dijkstra_path_length(road_map, start, end,
                                               weight='distance')
            assert distance == expected
            assert_is_walk(path, start, end)
        else:
            assert (path, distance) == ([], 0)

        assert distance == sum(r.distance for r in path)
