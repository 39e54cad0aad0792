"""Unit tests for timestamp id generation."""

from datetime import datetime, timezone

from app.application.services.id_generator import TimestampIdGenerator


def test_id_uses_prefix_and_epoch_millis():
    ids = TimestampIdGenerator(lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))

    assert ids.new_id("user") == "user-1704067200000"


def test_ids_within_same_millisecond_are_unique():
    ids = TimestampIdGenerator(lambda: datetime(2024, 1, 1, tzinfo=timezone.utc))

    generated = [ids.new_id("c") for _ in range(3)]

    assert generated == ["c-1704067200000", "c-1704067200001", "c-1704067200002"]
