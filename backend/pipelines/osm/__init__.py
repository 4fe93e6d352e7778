"""
OSM Module
Decoded map data, loading, area filters and statistics
"""
from .dataset import ElementType, Member, Node, OsmDataset, Relation, Way
from .filters import AreaFilter, area_predicate, by_query, parse_area_filter
from .loader import DatasetFormatError, load_dataset, parse_elements

__all__ = [
    "ElementType",
    "Member",
    "Node",
    "OsmDataset",
    "Relation",
    "Way",
    "AreaFilter",
    "area_predicate",
    "by_query",
    "parse_area_filter",
    "DatasetFormatError",
    "load_dataset",
    "parse_elements",
]
