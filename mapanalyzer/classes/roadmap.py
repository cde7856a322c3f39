# -*- coding: utf-8 -*-

from collections import namedtuple

import networkx as nx
from networkx.readwrite import json_graph

"""
Module for the Road record and the RoadMap extension to the networkx
MultiGraph class
"""


class Road(namedtuple('Road', ['id', 'distance', 'from_point', 'to_point'])):

    """
    Undirected road between 2 points

    Attributes:
        id:  integer id of the road (unique within an input)
        distance:  non-negative integer length of the road
        from_point, to_point:  names of the endpoints, order is only kept
            for reporting
    """

    __slots__ = ()

    @property
    def sort_key(self):
        """ roads are ordered by distance, then by id """
        return (self.distance, self.id)

    def other(self, point):
        """ Return the endpoint of this road that is not ``point`` """
        return self.to_point if self.from_point == point else self.from_point


class RoadMap(nx.MultiGraph):

    """
    class representing a networkx MultiGraph of points connected by roads

    Attributes:
        inherited from nx.MultiGraph
        start, end:  points between which routes are searched
            (stored in the graph attribute dict)
        roads:  roads in the order they were added

    Each road is an edge keyed by its position in ``roads`` and carries
    the ``Road`` itself along with its ``distance`` as edge data.

    NOTE:  the networkx adjacency groups edges by neighbor, so the
    insertion ordered incident road lists the path search walks are
    kept separately (see ``connections``)
    """

    def __init__(self, start=None, end=None, data=None, **attr):
        super(RoadMap, self).__init__(data, **attr)
        self.graph['start'] = start
        self.graph['end'] = end
        self.roads = []
        self._connections = {}

    @classmethod
    def from_records(cls, records, start, end):
        """
        Build a RoadMap from parsed input records

        Args:
            records:  iterable of (from, to, distance, id) tuples
            start, end:  point names between which routes are searched

        Returns:
            RoadMap with every road added in record order
        """
        road_map = cls(start=start, end=end)
        for from_point, to_point, distance, road_id in records:
            road_map.add_road(Road(road_id, distance, from_point, to_point))

        return road_map

    @property
    def start(self):
        return self.graph['start']

    @property
    def end(self):
        return self.graph['end']

    def add_road(self, road):
        """
        Add road to the map, registering it with both of its endpoints

        No validation is done here, duplicate ids and self loops are
        added like any other road
        """
        key = len(self.roads)
        self.roads.append(road)
        self.add_edge(road.from_point, road.to_point, key=key,
                      road=road, distance=road.distance)

        self._connections.setdefault(road.from_point, []).append(road)
        self._connections.setdefault(road.to_point, []).append(road)

    def connections(self, point):
        """
        Roads incident to point in the order they were added

        Returns an empty list for points without roads (or unknown points)
        """
        return self._connections.get(point, [])

    def barely_connected(self, roads):
        """
        Derive a RoadMap over the same points and start/end that only
        has the given roads

        Args:
            roads:  subset of this map's roads (e.g. spanning forest)
        """
        road_map = self.__class__(start=self.start, end=self.end)
        road_map.add_nodes_from(self.nodes())
        for road in roads:
            road_map.add_road(road)

        return road_map

    def total_distance(self):
        """
        Sum of road distances over all adjacency lists

        Every road is counted once per endpoint, so this is twice the
        total length of the roads
        """
        return sum(d for _, d in self.degree(weight='distance'))

    def to_json(self):
        """ node-link representation of the map (json serializable) """
        g = nx.MultiGraph(start=self.start, end=self.end)
        g.add_nodes_from(self.nodes())
        g.add_edges_from((r.from_point, r.to_point, k,
                          {'id': r.id, 'distance': r.distance,
                           'from_point': r.from_point,
                           'to_point': r.to_point})
                         for k, r in enumerate(self.roads))
        return json_graph.node_link_data(g, edges='edges')
