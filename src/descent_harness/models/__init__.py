"""Data models for parse events and measurements.

This module provides Pydantic-validated models for:
- Event: One unit emitted by a parse pass
- Measurement: Bench-mode throughput record
"""

from .event import Event, encode_content
from .measurement import Measurement, MIB

__all__ = ["Event", "encode_content", "Measurement", "MIB"]
