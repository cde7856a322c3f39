# -*- coding: utf-8 -*-

import logging

from mapanalyzer.classes.unionfind import UnionFind

log = logging.getLogger('mapanalyzer')


def point_index(points):
    """
    Dense index of points for the disjoint set

    Points are numbered in case-insensitive name order (exact name breaks
    ties) so the numbering doesn't depend on the order points were seen
    """
    ordered = sorted(points, key=lambda p: (p.lower(), p))
    return {point: i for i, point in enumerate(ordered)}


def barely_connected_roads(road_map):

    """
    algorithm to compute the minimum spanning forest of the roads in
    road_map (the barely connected map)

    Uses Kruskal's algorithm; roads are tested in (distance, id) order so
    of 2 equally long roads the one with the lower id is kept

    Args:
        road_map:  RoadMap whose points are to be connected

    Returns:
        list of Road in the order they were accepted.  Has
        len(points) - 1 roads if road_map is connected, fewer otherwise
    """

    points = list(road_map.nodes())
    index = point_index(points)
    subgraphs = UnionFind(len(points))

    # roads in the barely connected map
    accepted = []
    for road in sorted(road_map.roads, key=lambda r: r.sort_key):
        if len(accepted) == len(points) - 1:
            break

        u, v = index[road.from_point], index[road.to_point]
        # if doesn't create cycle, connect the subgraphs
        if subgraphs[u] != subgraphs[v]:
            subgraphs.union(u, v)
            accepted.append(road)

    if points and len(accepted) < len(points) - 1:
        log.info("road map is not connected, barely connected map has "
                 "{} components".format(subgraphs.component_count()))

    return accepted
