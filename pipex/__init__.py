"""Run two commands joined by a pipe between an input file and an output file, with small string, character, buffer, list, line-reading and output helpers."""

__version__ = "0.1.0"
__all__ = ["chars", "linkedlist", "lines", "memory", "output", "paths", "pipeline", "strings"]