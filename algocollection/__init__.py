"""Classic algorithms and data structures: sorting, searching, expressions,
containers, linked lists, trees, heaps, graphs, string matching, the DES key
schedule, dynamic programming and more."""

__version__ = "0.1.0"