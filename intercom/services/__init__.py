"""
Resource accessors for the Intercom API.

Each module wraps one resource and delegates every call to the shared
request pipeline.
"""

from intercom.services.admins_service import AdminsService
from intercom.services.bulk_service import BulkService
from intercom.services.companies_service import CompaniesService
from intercom.services.conversations_service import ConversationsService
from intercom.services.counts_service import CountsService
from intercom.services.events_service import EventsService
from intercom.services.leads_service import LeadsService
from intercom.services.messages_service import MessagesService
from intercom.services.notes_service import NotesService
from intercom.services.segments_service import SegmentsService
from intercom.services.tags_service import TagsService
from intercom.services.users_service import UsersService

__all__ = [
    "AdminsService",
    "BulkService",
    "CompaniesService",
    "ConversationsService",
    "CountsService",
    "EventsService",
    "LeadsService",
    "MessagesService",
    "NotesService",
    "SegmentsService",
    "TagsService",
    "UsersService",
]
