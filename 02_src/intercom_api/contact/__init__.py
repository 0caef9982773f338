"""Contact module."""

from .api import ContactAPI
from .service import ContactService, IContactRepository

__all__ = ["ContactAPI", "ContactService", "IContactRepository"]
