"""HTTP-backed contact repository."""

from ..http_client import IHTTPClient
from ..models import Contact, ContactList, ContactListParams, User, UserIdentifiers

# Fields the API computes itself; sending them back on create/update is rejected.
READ_ONLY_FIELDS = {
    "type",
    "id",
    "workspace_id",
    "created_at",
    "updated_at",
    "last_seen_at",
    "last_replied_at",
    "last_contacted_at",
    "last_email_opened_at",
    "last_email_clicked_at",
    "browser",
    "browser_version",
    "browser_language",
    "os",
    "location",
    "social_profiles",
    "tags",
    "notes",
    "companies",
}


def _writable(contact: Contact) -> dict:
    return {
        key: value for key, value in contact.to_json().items() if key not in READ_ONLY_FIELDS
    }


class ContactAPI:
    """Contact endpoints of the REST API."""

    def __init__(self, http: IHTTPClient):
        self._http = http

    def find(self, identifiers: UserIdentifiers) -> Contact:
        if identifiers.id:
            return Contact.model_validate(self._http.get(f"/contacts/{identifiers.id}"))
        params = {}
        if identifiers.user_id:
            params["user_id"] = identifiers.user_id
        if identifiers.email:
            params["email"] = identifiers.email
        return Contact.model_validate(self._http.get("/contacts", params=params))

    def list(self, params: ContactListParams) -> ContactList:
        return ContactList.model_validate(self._http.get("/contacts", params=params.to_query()))

    def scroll(self, scroll_param: str) -> ContactList:
        params = {"scroll_param": scroll_param} if scroll_param else None
        return ContactList.model_validate(self._http.get("/contacts/scroll", params=params))

    def create(self, contact: Contact) -> Contact:
        return Contact.model_validate(self._http.post("/contacts", body=_writable(contact)))

    def update(self, contact: Contact) -> Contact:
        return Contact.model_validate(
            self._http.put(f"/contacts/{contact.id}", body=_writable(contact))
        )

    def delete(self, id: str) -> Contact:
        return Contact.model_validate(self._http.delete(f"/contacts/{id}"))

    def convert(self, contact: Contact, user: User) -> User:
        # The lead is addressed by its external id when present, else by Intercom id
        lead = {"user_id": contact.external_id} if contact.external_id else {"id": contact.id}
        body = {"contact": lead, "user": user.to_json()}
        return User.model_validate(self._http.post("/contacts/convert", body=body))
