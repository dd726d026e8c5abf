"""Streaming file digests for the command line."""

PROGRAM_NAME = "boohash"
__version__ = "0.3.0"

__all__ = ["PROGRAM_NAME", "__version__"]
