# -*- coding: utf-8 -*-

import json
import logging
import re

from networkx.readwrite import json_graph
from networkx.utils.decorators import open_file

from mapanalyzer.exception import InputFormatException
from mapanalyzer.classes.roadmap import Road, RoadMap

"""
Package for reading road map inputs and writing analysis outputs
"""

log = logging.getLogger('mapanalyzer')

ROAD_FIELD_COUNT = 4

INTEGER = re.compile(r"[+-]?[0-9]+")


@open_file(0, 'r')
def read_lines(input_file):
    """
    Args:
        input_file:  path to input as string or file

    Returns:
        list of the non-blank lines of input_file without line endings
    """
    return [line.rstrip("\r\n") for line in input_file
            if line.strip()]


def parse_int(value, name, line_number):
    """ optionally signed ascii digits only, no spaces or underscores """
    if not INTEGER.fullmatch(value):
        raise InputFormatException(
            "line {}: {} '{}' is not an integer".format(
                line_number, name, value))
    return int(value)


def parse_records(lines):
    """
    Parse input lines into the start/end points and road records

    The first line is ``end<TAB>start``, every other line is
    ``from<TAB>to<TAB>distance<TAB>id``

    Args:
        lines:  sequence of input lines

    Returns:
        start, end, records:  records as list of (from, to, distance, id)

    Raises:
        InputFormatException if any line is malformed
    """
    if not lines:
        raise InputFormatException("input has no start/end line")

    locations = lines[0].split("\t")
    if len(locations) != 2:
        raise InputFormatException(
            "line 1: expected 'end<TAB>start', got '{}'".format(lines[0]))
    end, start = locations

    records = []
    for line_number, line in enumerate(lines[1:], start=2):
        fields = line.split("\t")
        if len(fields) != ROAD_FIELD_COUNT:
            raise InputFormatException(
                "line {}: expected {} tab separated fields, got {}".format(
                    line_number, ROAD_FIELD_COUNT, len(fields)))

        from_point, to_point, distance, road_id = fields
        records.append((from_point, to_point,
                        parse_int(distance, "distance", line_number),
                        parse_int(road_id, "id", line_number)))

    log.info("parsed {} roads, route from {} to {}".format(
        len(records), start, end))
    return start, end, records


@open_file(1, 'w')
def write_report(lines, output_file):
    """
    Args:
        lines:  report lines
        output_file:  path to output as string or file
    """
    output_file.write("\n".join(lines))


@open_file(1, 'w')
def write_json(road_map, json_file):
    """
    Args:
        road_map:  A RoadMap object
        json_file:  as string path or file to output networkx link-node
            format json rep
    """
    json_file.write(json.dumps(road_map.to_json()))


@open_file(0, 'r')
def read_json_road_map(json_file):
    """
    Args:
        json_file: path to json file as string or file

    Assumes the json is in the networkx link-node format written by
    write_json.  Roads are added in their original order.
    """
    js = json.load(json_file)
    g = json_graph.node_link_graph(js, multigraph=True, edges='edges')

    road_map = RoadMap(start=g.graph.get('start'), end=g.graph.get('end'))
    road_map.add_nodes_from(g.nodes())
    edges = sorted(g.edges(keys=True, data=True), key=lambda e: e[2])
    for _, _, _, data in edges:
        road_map.add_road(Road(data['id'], data['distance'],
                               data['from_point'], data['to_point']))

    return road_map
