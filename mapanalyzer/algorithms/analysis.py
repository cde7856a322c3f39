# -*- coding: utf-8 -*-

import logging

import numpy as np

log = logging.getLogger('mapanalyzer')


def ratio(numerator, denominator):
    """
    numerator / denominator as a float

    A zero denominator gives inf (or nan for 0 / 0) rather than raising
    """
    with np.errstate(divide='ignore', invalid='ignore'):
        return float(np.float64(numerator) / np.float64(denominator))


def analyze(road_map, barely_connected_map, path_distance,
            barely_connected_path_distance):
    """
    Compare the barely connected map with the original one

    Args:
        road_map:  the original RoadMap
        barely_connected_map:  RoadMap of the barely connected roads
        path_distance:  length of the fastest route on road_map
        barely_connected_path_distance:  length of the fastest route on
            barely_connected_map

    Returns:
        material_ratio:  ratio of construction material (total road
            distance) of the barely connected map to the original
        route_ratio:  ratio of the fastest route lengths
    """
    total = road_map.total_distance()
    barely_connected_total = barely_connected_map.total_distance()

    if total == 0 or path_distance == 0:
        log.warning("analysis has a zero denominator "
                    "(total distance {}, route distance {})".format(
                        total, path_distance))

    material_ratio = ratio(barely_connected_total, total)
    route_ratio = ratio(barely_connected_path_distance, path_distance)
    return material_ratio, route_ratio
