"""Fixed demo data returned for any collection that has never been written.

Relative timestamps (``added_at`` a week ago, etc.) are computed from the
injected clock at read time.
"""

from collections.abc import Callable
from datetime import datetime, timedelta
from typing import Any

from app.domain.entities import (
    CardStatus,
    CardTheme,
    Contact,
    ContactSegment,
    DigitalCard,
    LogEntry,
    MessageTemplate,
    SocialField,
    SocialFieldType,
    TemplateCategory,
    User,
    UserRole,
)
from app.infrastructure.storage.storage_keys import StorageKey


def seed_users(now: datetime) -> list[User]:
    return [
        User(
            id="admin-1",
            name="Sarah Connor",
            email="admin@hawkforce.ai",
            role=UserRole.ADMIN,
            position="Chief Security Officer",
            department="Security",
            phone="+1 (555) 010-9988",
            card_status=CardStatus.ACTIVE,
            avatar_url="https://picsum.photos/200/200?random=1",
            issued_at=now,
        ),
        User(
            id="user-1",
            name="John Anderson",
            email="john.anderson@hawkforce.ai",
            role=UserRole.USER,
            position="Software Engineer",
            department="Engineering",
            phone="+1 (555) 019-2233",
            card_status=CardStatus.ACTIVE,
            avatar_url="https://picsum.photos/200/200?random=2",
            issued_at=now,
        ),
    ]


def seed_contacts(now: datetime) -> list[Contact]:
    return [
        Contact(
            id="c-1",
            owner_id="user-1",
            name="Thomas Mueller",
            email="thomas.m@example.com",
            phone="491522334455",
            added_at=now - timedelta(days=7),
            last_meeting=now - timedelta(days=1),
            notes="Interested in enterprise security stack. Follow up next Tuesday.",
            avatar_url="https://picsum.photos/200/200?random=10",
            linkedin="https://linkedin.com/in/thomasmueller",
            tag="Work",
        ),
        Contact(
            id="c-2",
            owner_id="user-1",
            name="Emily Watson",
            email="emily.w@techcorp.com",
            phone="15550123456",
            added_at=now - timedelta(days=14),
            last_meeting=now - timedelta(days=5),
            notes="Discussed potential partnership for Q3. Needs demo.",
            avatar_url="https://picsum.photos/200/200?random=11",
            linkedin="https://linkedin.com/in/emilywatson",
            tag="VIP",
        ),
    ]


def seed_segments(now: datetime) -> list[ContactSegment]:
    return [
        ContactSegment(
            id="seg-1",
            owner_id="user-1",
            name="Work",
            color="#3b82f6",
            description="Business contacts and clients",
        ),
        ContactSegment(
            id="seg-2",
            owner_id="user-1",
            name="VIP",
            color="#8b5cf6",
            description="Key decision makers",
        ),
    ]


def seed_templates(now: datetime) -> list[MessageTemplate]:
    return [
        MessageTemplate(
            id="tm-1",
            owner_id="user-1",
            title="New Year Greeting",
            category=TemplateCategory.HOLIDAY,
            content="Happy New Year! Wishing you a prosperous year ahead filled with success and joy.",
        ),
        MessageTemplate(
            id="tm-2",
            owner_id="user-1",
            title="Follow-up",
            category=TemplateCategory.FOLLOW_UP,
            content=(
                "Hi! It was great connecting with you recently. Would love to catch up "
                "and discuss our potential collaboration further."
            ),
        ),
    ]


def seed_logs(now: datetime) -> list[LogEntry]:
    return [
        LogEntry(
            id="log-1",
            action="SYSTEM_INIT",
            details="System initialized",
            timestamp=now - timedelta(seconds=10_000),
        ),
    ]


def seed_cards(now: datetime) -> list[DigitalCard]:
    return [
        DigitalCard(
            id="card-1",
            user_id="user-1",
            title="Work",
            theme=CardTheme.MODERN,
            color="#3b82f6",
            first_name="John",
            last_name="Anderson",
            job_title="Software Engineer",
            company="Hawkforce AI",
            department="Engineering",
            fields=[
                SocialField(
                    id="f1",
                    type=SocialFieldType.EMAIL,
                    value="john.anderson@hawkforce.ai",
                    label="Work Email",
                ),
                SocialField(
                    id="f2",
                    type=SocialFieldType.PHONE,
                    value="+1 (555) 019-2233",
                    label="Work Phone",
                ),
            ],
            avatar_url="https://picsum.photos/200/200?random=2",
            views=120,
            unique_views=85,
            saves=12,
        ),
    ]


SEEDS: dict[StorageKey, Callable[[datetime], list[Any]]] = {
    StorageKey.USERS: seed_users,
    StorageKey.LOGS: seed_logs,
    StorageKey.CARDS: seed_cards,
    StorageKey.CONTACTS: seed_contacts,
    StorageKey.SEGMENTS: seed_segments,
    StorageKey.TEMPLATES: seed_templates,
}
