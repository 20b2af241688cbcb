"""Run two commands connected by a pipe between an input file and an output file, with small string helpers."""

__version__ = "0.1.0"

__all__ = ["bounded", "chars", "output", "pipeline", "strops"]