"""Collector access - HTTP client for the local trace API."""

from fpx_trace.collector.client import TraceClient

__all__ = ["TraceClient"]
