"""
Fossil pollen map.

Loads a table of pollen-taxon observations and shows, on a web map, the
records of one taxon within a time window.
"""

__version__ = "0.1.0"
