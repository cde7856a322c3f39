# -*- coding: utf-8 -*-

import logging

import numpy as np

from mapanalyzer.classes.roadmap import Road
from mapanalyzer.classes.unionfind import PriorityQueue

log = logging.getLogger('mapanalyzer')


def find_path(road_map, start, end):

    """
    Shortest path between 2 points of a RoadMap via dijkstra

    The queue is ordered by (cumulative distance, road id) so that of 2
    equally distant candidates the one reached via the lower road id is
    settled first.  Stale queue entries are skipped when popped instead
    of being updated in place.

    Args:
        road_map:  RoadMap to search
        start:  point the path starts at
        end:  point the path ends at

    Returns:
        path:  list of Road from start to end (empty if end == start or
            end is unreachable)
        total_distance:  sum of the distances of the roads in path
    """

    distances = {point: np.inf for point in road_map.nodes()}
    distances[start] = 0
    previous = {}
    visited = set()

    queue = PriorityQueue()
    # zero length road into start, only used to prime the loop
    seed = Road(-1, 0, start, start)
    queue.push(start, seed.sort_key)

    while queue:
        point = queue.pop()

        if point in visited:
            continue
        visited.add(point)

        if point == end:
            break

        for road in road_map.connections(point):
            next_point = road.other(point)
            distance = distances[point] + road.distance
            if distance < distances.get(next_point, np.inf):
                distances[next_point] = distance
                previous[next_point] = road
                queue.push(next_point, (distance, road.id))

    path = walk_back(previous, end)
    if end not in visited:
        log.info("no route from {} to {}".format(start, end))

    path.reverse()
    return path, sum(road.distance for road in path)


def walk_back(previous, end):
    """
    Follow the predecessor roads from end until a point has none

    Returns:
        list of Road in end to start order
    """
    path = []
    step = end
    while step in previous:
        road = previous[step]
        path.append(road)
        step = road.other(step)

    return path
