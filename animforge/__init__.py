"""Building blocks for 2D animation: vectors, matrices, colours, rectangles, line shapes, mouse state and a stopwatch."""

__version__ = "0.1.0"