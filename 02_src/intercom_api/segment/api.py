"""HTTP-backed segment repository."""

from ..http_client import IHTTPClient
from ..models import Segment, SegmentList


class SegmentAPI:
    def __init__(self, http: IHTTPClient):
        self._http = http

    def list(self) -> SegmentList:
        return SegmentList.model_validate(self._http.get("/segments"))

    def find(self, id: str) -> Segment:
        return Segment.model_validate(self._http.get(f"/segments/{id}"))
