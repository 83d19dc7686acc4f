"""
client.py
---------

Entry point of the library. ``IntercomClient`` is the request pipeline
with one accessor per API resource attached, all sharing the same
credentials, extra options and transport.

Usage
-----

.. code-block:: python

    from intercom import IntercomClient

    client = IntercomClient("app_id", "api_key", {"headers": {"Intercom-Version": "1.1"}})
    page = client.users.get_users({"per_page": 50})
    while page.get("pages", {}).get("next"):
        page = client.users.next_page(page["pages"])
"""

from __future__ import annotations

from typing import Any, Mapping, Optional

from intercom.clients.http_client import HTTPClient
from intercom.core.config import Settings, get_settings
from intercom.services import (
    AdminsService,
    BulkService,
    CompaniesService,
    ConversationsService,
    CountsService,
    EventsService,
    LeadsService,
    MessagesService,
    NotesService,
    SegmentsService,
    TagsService,
    UsersService,
)


class IntercomClient(HTTPClient):
    """Pipeline plus resource accessors.

    Accessors are created once here and keep a reference to this
    instance, so :meth:`set_client` affects all of them.
    """

    def __init__(self, username: str, password: str,
                 extra_options: Optional[Mapping[str, Any]] = None,
                 *, settings: Optional[Settings] = None) -> None:
        super().__init__(username, password, extra_options, settings=settings)
        self.users = UsersService(self)
        self.events = EventsService(self)
        self.companies = CompaniesService(self)
        self.messages = MessagesService(self)
        self.conversations = ConversationsService(self)
        self.leads = LeadsService(self)
        self.admins = AdminsService(self)
        self.tags = TagsService(self)
        self.segments = SegmentsService(self)
        self.counts = CountsService(self)
        self.bulk = BulkService(self)
        self.notes = NotesService(self)

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None,
                      extra_options: Optional[Mapping[str, Any]] = None) -> "IntercomClient":
        """Build a client from ``INTERCOM_USERNAME``/``INTERCOM_PASSWORD``.

        :raises ValueError: if no username is configured
        """
        settings = settings or get_settings()
        if not settings.username:
            raise ValueError("INTERCOM_USERNAME is not set")
        return cls(settings.username, settings.password or "", extra_options, settings=settings)
