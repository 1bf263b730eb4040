"""Algorithms and data structures for competitive programming: strings, graphs,
number theory, an order-statistics multiset, the convex hull trick and plane geometry."""

__version__ = "0.1.0"