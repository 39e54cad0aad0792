"""Fixed keys of the persisted state layout — one JSON array per key."""

from enum import Enum


class StorageKey(str, Enum):
    USERS = "hawk_users"
    LOGS = "hawk_logs"
    CARDS = "hawk_cards"
    CONTACTS = "hawk_contacts"
    SEGMENTS = "hawk_segments"
    TEMPLATES = "hawk_templates"
