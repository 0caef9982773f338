"""Segment module."""

from .api import SegmentAPI
from .service import ISegmentRepository, SegmentService

__all__ = ["ISegmentRepository", "SegmentAPI", "SegmentService"]
