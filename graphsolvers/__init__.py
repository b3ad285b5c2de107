"""Random Euclidean point sets, complete graphs, a placeholder edge solver and SVG rendering."""

__version__ = "0.1.0"
__all__ = ["primitives", "subsets", "solver", "visualization", "cli"]