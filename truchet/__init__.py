"""Truchet mats — multi-material hexagonal Truchet tile panels as OpenSCAD."""

__version__ = "0.1.0"
