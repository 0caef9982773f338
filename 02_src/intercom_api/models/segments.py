"""Segment resources."""

from .base import Resource, StrID


class Segment(Resource):
    type: str | None = None
    id: StrID | None = None
    name: str | None = None
    created_at: int | None = None
    updated_at: int | None = None
    person_type: str | None = None
    count: int | None = None

    def __str__(self) -> str:
        return (
            f"[intercom] segment {{ type: {self.type}, id: {self.id}, name: {self.name}, "
            f"created_at: {self.created_at}, updated_at: {self.updated_at}, "
            f"person_type: {self.person_type} }}"
        )


class SegmentList(Resource):
    type: str | None = None
    segments: list[Segment] = []
