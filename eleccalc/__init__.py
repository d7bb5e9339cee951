"""Electrical calculator: wire sizing, voltage drop, conduit fill and DC tools."""

__version__ = "1.0.1"
