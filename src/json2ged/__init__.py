"""
json2ged: convert a JSON genealogy document into a GEDCOM 5.5.1 file.
"""

__version__ = "0.1.0"
