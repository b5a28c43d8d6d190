"""Enumerate OpenCL platforms and devices and dump their properties."""

__version__ = "0.1.0"
