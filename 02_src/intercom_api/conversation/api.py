"""HTTP-backed conversation repository."""

from ..http_client import IHTTPClient
from ..models import Conversation, ConversationList, ConversationListParams, Reply


class ConversationAPI:
    """Conversation endpoints of the REST API."""

    def __init__(self, http: IHTTPClient):
        self._http = http

    def find(self, id: str) -> Conversation:
        return Conversation.model_validate(self._http.get(f"/conversations/{id}"))

    def list(self, params: ConversationListParams) -> ConversationList:
        return ConversationList.model_validate(
            self._http.get("/conversations", params=params.to_query())
        )

    def read(self, id: str) -> Conversation:
        return Conversation.model_validate(
            self._http.put(f"/conversations/{id}", body={"read": True})
        )

    def reply(self, id: str, reply: Reply) -> Conversation:
        return Conversation.model_validate(
            self._http.post(f"/conversations/{id}/reply", body=reply.to_json())
        )
