# -*- coding: utf-8 -*-

"""
Rendering of analysis results into report lines

Each function renders the lines of one stage; callers concatenate them
"""

import math
from decimal import Decimal, ROUND_HALF_UP

MATERIAL_RATIO_LABEL = \
    "Ratio of Construction Material Usage Between Barely Connected " \
    "and Original Map"
ROUTE_RATIO_LABEL = \
    "Ratio of Fastest Route Between Barely Connected and Original Map"


def road_line(road):
    """ from<TAB>to<TAB>distance<TAB>id """
    return "{}\t{}\t{}\t{}".format(road.from_point, road.to_point,
                                   road.distance, road.id)


def format_ratio(value):
    """
    ratio with 2 decimals, non-finite values as Infinity/-Infinity/NaN

    Rounds half up on the shortest decimal form of value, so 1.125
    renders as 1.13
    """
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    return str(Decimal(repr(value)).quantize(Decimal("0.01"),
                                             rounding=ROUND_HALF_UP))


def route_lines(start, end, path, total_distance, barely_connected=False):
    """
    Header plus one line per road of path

    Args:
        start, end:  points the route was searched between
        path:  roads from start to end (as returned by find_path)
        total_distance:  length of path
        barely_connected:  whether the route is on the barely connected map

    Returns:
        list of lines, roads listed from end back to start
    """
    suffix = " on Barely Connected Map" if barely_connected else ""
    header = "Fastest Route from {} to {}{} ({} KM):".format(
        end, start, suffix, total_distance)
    return [header] + [road_line(road) for road in reversed(path)]


def road_lines(roads):
    """ Barely connected map header plus one line per road """
    return ["Roads of Barely Connected Map is:"] + \
        [road_line(road) for road in roads]


def analysis_lines(material_ratio, route_ratio):
    return ["Analysis:",
            "{}: {}".format(MATERIAL_RATIO_LABEL,
                            format_ratio(material_ratio)),
            "{}: {}".format(ROUTE_RATIO_LABEL, format_ratio(route_ratio))]
