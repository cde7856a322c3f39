# -*- coding: utf-8 -*-

from mapanalyzer.classes.roadmap import Road, RoadMap


def road_map_with_loop():
    records = [('A', 'B', 5, 1),
               ('B', 'C', 7, 2),
               ('C', 'C', 2, 3),
               ('A', 'B', 5, 4)]
    return RoadMap.from_records(records, 'A', 'C')


def test_road_order():

    roads = [Road(3, 5, 'A', 'B'), Road(1, 5, 'B', 'C'),
             Road(9, 1, 'C', 'D'), Road(2, 7, 'A', 'D')]
    ids = [r.id for r in sorted(roads, key=lambda r: r.sort_key)]
    assert ids == [9, 1, 3, 2], "roads should sort by distance then id"

    assert Road(1, 5, 'A', 'B').other('A') == 'B'
    assert Road(1, 5, 'A', 'B').other('B') == 'A'
    assert Road(1, 5, 'A', 'A').other('A') == 'A'


def test_from_records():

    road_map = road_map_with_loop()

    assert road_map.start == 'A' and road_map.end == 'C'
    assert list(road_map.nodes()) == ['A', 'B', 'C']
    assert [r.id for r in road_map.roads] == [1, 2, 3, 4]
    # parallel roads are kept as separate edges
    assert road_map.number_of_edges('A', 'B') == 2

    # incident roads in insertion order, self loop listed per endpoint
    assert [r.id for r in road_map.connections('B')] == [1, 2, 4]
    assert [r.id for r in road_map.connections('C')] == [2, 3, 3]
    assert road_map.connections('Z') == []


def test_total_distance():
    """ every road is counted once per endpoint """

    road_map = road_map_with_loop()
    assert road_map.total_distance() == 2 * (5 + 7 + 2 + 5)

    by_connections = sum(r.distance
                         for point in road_map.nodes()
                         for r in road_map.connections(point))
    assert road_map.total_distance() == by_connections


def test_barely_connected():

    road_map = road_map_with_loop()
    roads = [road_map.roads[0], road_map.roads[1]]
    reduced = road_map.barely_connected(roads)

    assert (reduced.start, reduced.end) == ('A', 'C')
    assert set(reduced.nodes()) == set(road_map.nodes())
    assert reduced.roads == roads
    assert [r.id for r in reduced.connections('B')] == [1, 2]
    assert reduced.total_distance() == 24
    # original is untouched
    assert len(road_map.roads) == 4


def test_isolated_points():

    road_map = RoadMap(start='A', end='B')
    road_map.add_nodes_from(['A', 'B'])
    assert road_map.total_distance() == 0
    assert road_map.connections('A') == []
