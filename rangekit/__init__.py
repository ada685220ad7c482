"""Fenwick trees, segment trees, sparse tables, ancestor tables and tree diameters."""

__version__ = "0.1.0"