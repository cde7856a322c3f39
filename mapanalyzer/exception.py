# -*- coding: utf-8 -*-
"""
Exceptions

Base exceptions for MapAnalyzer library
"""

class MapAnalyzerException(Exception):
    """Root of all MapAnalyzer exceptions"""

class InputFormatException(MapAnalyzerException):
    """Input lines could not be parsed into locations and roads"""
