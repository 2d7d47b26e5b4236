"""JSON sample to typed source code generator."""

__version__ = "0.1.0"
