# -*- coding: utf-8 -*-

import os
import logging
import json
import jsonschema

from collections import namedtuple

from mapanalyzer.classes.roadmap import RoadMap
import mapanalyzer.io as mio
import mapanalyzer.algorithms as algo
import mapanalyzer.report as report

log = logging.getLogger('mapanalyzer')


Route = namedtuple('Route', ['path', 'distance', 'lines'])

MapAnalysis = namedtuple('MapAnalysis', ['road_map',
                                         'route',
                                         'barely_connected_roads',
                                         'barely_connected_map',
                                         'barely_connected_route',
                                         'material_ratio',
                                         'route_ratio',
                                         'lines'])


class MapAnalyzerRunner(object):

    """
    class for running the road map analysis on an input file

    Attributes:
        config:  dict of configuration params

            input_filename:  tab separated road map input
            output_filename:  file the report lines are written to
            json_filename:  (optional) file the barely connected map is
                written to as node-link json
    """

    SCHEMA_FILE = "mapanalyzer_config_schema.json"

    def __init__(self, config, output_directory="."):
        self.config = config
        self.output_directory = output_directory

    def run(self):
        """
        read the road map, analyze it and write the output files
        based on configuration

        Returns:
            MapAnalysis of the input road map
        """

        log.info("reading {}".format(self.config['input_filename']))
        lines = mio.read_lines(self.config['input_filename'])
        start, end, records = mio.parse_records(lines)
        road_map = RoadMap.from_records(records, start, end)

        analysis = analyze_road_map(road_map)

        log.info("writing output")
        if not os.path.exists(self.output_directory):
            os.makedirs(self.output_directory)

        mio.write_report(analysis.lines,
                         self.output_path(self.config['output_filename']))
        if 'json_filename' in self.config:
            mio.write_json(analysis.barely_connected_map,
                           self.output_path(self.config['json_filename']))

        return analysis

    def output_path(self, filename):
        return os.path.join(self.output_directory, filename)

    def validate(self):
        """
        validate configuration
        throws jsonschema Validate exception if invalid
        """

        # load schema and validate it via jsonschema
        schema_path = os.path.join(os.path.dirname(
            os.path.abspath(__file__)), MapAnalyzerRunner.SCHEMA_FILE)
        with open(schema_path) as schema_file:
            schema = json.load(schema_file)
        jsonschema.validate(self.config, schema)


def fastest_route(road_map, barely_connected=False):
    """
    Fastest route between the map's start and end along with its
    report lines
    """
    path, distance = algo.find_path(road_map, road_map.start, road_map.end)
    lines = report.route_lines(road_map.start, road_map.end, path, distance,
                               barely_connected=barely_connected)
    return Route(path, distance, lines)


def analyze_road_map(road_map):
    """
    run the full analysis on a road map

    fastest route -> barely connected roads -> barely connected map ->
    fastest route on barely connected map -> ratios

    Args:
        road_map:  RoadMap with start and end set

    Returns:
        MapAnalysis with the result of every stage and the report lines
    """

    log.info("finding fastest route from {} to {} over {} roads".format(
             road_map.start, road_map.end, len(road_map.roads)))
    route = fastest_route(road_map)

    log.info("building barely connected map of {} points".format(
             road_map.number_of_nodes()))
    roads = algo.barely_connected_roads(road_map)
    barely_connected_map = road_map.barely_connected(roads)

    log.info("finding fastest route on barely connected map")
    barely_connected_route = fastest_route(barely_connected_map,
                                           barely_connected=True)

    log.info("analyzing")
    material_ratio, route_ratio = algo.analyze(
        road_map, barely_connected_map,
        route.distance, barely_connected_route.distance)

    lines = route.lines + \
        report.road_lines(roads) + \
        barely_connected_route.lines + \
        report.analysis_lines(material_ratio, route_ratio)

    return MapAnalysis(road_map, route, roads, barely_connected_map,
                       barely_connected_route, material_ratio, route_ratio,
                       lines)
