"""Core data model and geometry."""

from .graph import Graph, DataSource, ArrayDataSource, Sample, demo_samples
from .geometry import LayoutRect, AxisExtent, GraphExtents, compute_extents, to_screen

__all__ = [
    "Graph",
    "DataSource",
    "ArrayDataSource",
    "Sample",
    "demo_samples",
    "LayoutRect",
    "AxisExtent",
    "GraphExtents",
    "compute_extents",
    "to_screen",
]
