"""Range-maximum combiners and combiner packs for segment-tree nodes, with small filter and record types."""

__version__ = "0.1.0"