"""Tests for the registration domain models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from festadmin.models import (
    EVENT_DETAILS,
    Participant,
    Registration,
    expected_participants,
    is_known_event,
)


class TestEventCatalogue:
    """Tests for the known event enumeration."""

    def test_catalogue_order_and_counts(self):
        assert list(EVENT_DETAILS)[:3] == ["Treasure Hunt", "IT Brand Rangoli", "Quiz"]
        assert EVENT_DETAILS["Treasure Hunt"] == 4
        assert EVENT_DETAILS["PPT Presentation"] == 1
        assert len(EVENT_DETAILS) == 11

    def test_known_event_is_exact_match(self):
        assert is_known_event("BGMI") is True
        assert is_known_event("bgmi") is False

    def test_expected_participants_for_unknown_event(self):
        assert expected_participants("Chess") is None


class TestParticipant:
    """Tests for Participant serialization."""

    def test_class_field_uses_wire_name(self):
        participant = Participant.model_validate({"name": "Ann", "class": "XII-B", "contact": "555"})

        assert participant.class_ == "XII-B"
        assert participant.to_document() == {"name": "Ann", "class": "XII-B", "contact": "555"}

    def test_populate_by_attribute_name(self):
        assert Participant(name="Ann", class_="X").model_dump(by_alias=True)["class"] == "X"


class TestRegistration:
    """Tests for Registration mapping."""

    def test_wire_shape(self):
        registration = Registration(
            id="abc",
            team="Byte Me",
            event="Coding",
            participants=[Participant(name="Ann", class_="XI", contact="1")],
        )

        assert registration.model_dump(by_alias=True) == {
            "_id": "abc",
            "team": "Byte Me",
            "event": "Coding",
            "participants": [{"name": "Ann", "class": "XI", "contact": "1"}],
        }

    def test_from_record_dict_keeps_participant_order(self):
        record = {
            "id": "r1",
            "team": "A",
            "event": "Quiz",
            "participants": [{"name": n, "class": "", "contact": ""} for n in ("z", "a", "m")],
        }

        registration = Registration.from_record(record)

        assert [p.name for p in registration.participants] == ["z", "a", "m"]

    def test_from_record_missing_participants(self):
        registration = Registration.from_record({"id": "r1", "team": "A", "event": "Quiz", "participants": None})

        assert registration.participants == []

    def test_participant_count_is_not_enforced(self):
        registration = Registration(
            id="r1",
            team="A",
            event="Photo Edits",
            participants=[Participant(name="one"), Participant(name="two"), Participant(name="three")],
        )

        assert registration.expected_participants == 1
        assert len(registration.participants) == 3


class TestParticipantValidation:
    """Tests for participant field constraints."""

    def test_empty_name_is_rejected(self):
        with pytest.raises(ValidationError):
            Participant(name="")

    def test_missing_name_is_rejected(self):
        with pytest.raises(ValidationError):
            Participant.model_validate({"class": "X", "contact": "1"})
