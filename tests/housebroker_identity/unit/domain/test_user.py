"""Unit tests for the User aggregate."""

from datetime import datetime
from uuid import uuid4

from housebroker_identity import User


class TestUser:
    def test_create_is_active(self):
        user = User.create("anna@example.com", first_name="Anna", last_name="Berg")

        assert user.is_active
        assert user.email == "anna@example.com"
        assert user.created_at == user.updated_at

    def test_display_name(self):
        assert User.create("a@example.com", "Anna", "Berg").display_name == "Anna Berg"
        assert User.create("a@example.com", "Anna").display_name == "Anna"

    def test_display_name_falls_back_to_email(self):
        assert User.create("a@example.com").display_name == "a@example.com"

    def test_deactivate_and_activate(self):
        user = User.create("a@example.com")

        user.deactivate()
        assert not user.is_active

        user.activate()
        assert user.is_active

    def test_equality_by_id(self):
        user_id = uuid4()
        now = datetime(2024, 1, 1)
        first = User.reconstitute(
            user_id, "a@example.com", "", "", None, None, True, now, now
        )
        second = User.reconstitute(
            user_id, "b@example.com", "", "", None, None, False, now, now
        )

        assert first == second
        assert hash(first) == hash(second)

    def test_reconstitute_makes_timestamps_aware(self):
        naive = datetime(2024, 1, 1, 12, 0)
        user = User.reconstitute(
            uuid4(), "a@example.com", "", "", None, None, True, naive, naive
        )

        assert user.created_at.tzinfo is not None
        assert user.updated_at.tzinfo is not None
