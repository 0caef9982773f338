"""Segment operations over an injected repository."""

from typing import Protocol

from ..models import Segment, SegmentList


class ISegmentRepository(Protocol):
    """Request/response exchange for segment endpoints."""

    def list(self) -> SegmentList:
        """List all segments."""
        ...

    def find(self, id: str) -> Segment:
        """Fetch a segment by id."""
        ...


class SegmentService:
    """Segments defined in the workspace."""

    def __init__(self, repository: ISegmentRepository):
        self._repository = repository

    def list(self) -> SegmentList:
        """List all segments for the workspace."""
        return self._repository.list()

    def find(self, id: str) -> Segment:
        """Find a particular segment."""
        return self._repository.find(id)
