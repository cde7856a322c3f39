from mapanalyzer.algorithms.dijkstra import find_path
from mapanalyzer.algorithms.kruskal import barely_connected_roads
from mapanalyzer.algorithms.analysis import analyze
