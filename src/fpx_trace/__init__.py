"""fpx-trace: browse and insert redacted Fiberplane Studio traces."""

__version__ = "0.1.0"
