"""
Domain models for fest registrations.

A Registration is one team's entry into one event. Participants are value
objects owned by their registration; their order is the display and report
order.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Known events with their advisory team size, in sidebar display order.
# The counts are informational only - nothing enforces them.
EVENT_DETAILS: dict[str, int] = {
    "Treasure Hunt": 4,
    "IT Brand Rangoli": 2,
    "Quiz": 2,
    "Coding": 2,
    "Photo Edits": 1,
    "Video Edits": 1,
    "Soft Interview": 1,
    "Gaming Girls (Militia)": 2,
    "Free Fire": 2,
    "BGMI": 2,
    "PPT Presentation": 1,
}


def is_known_event(name: str) -> bool:
    """Check whether an event name belongs to the fest catalogue (exact match)."""
    return name in EVENT_DETAILS


def expected_participants(name: str) -> int | None:
    """Advisory participant count for an event, or None for unknown events."""
    return EVENT_DETAILS.get(name)


class Participant(BaseModel):
    """A single team member.

    ``class`` is a Python keyword, so the attribute is ``class_`` and the
    wire name is ``class``.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(min_length=1)
    class_: str = Field(default="", alias="class")
    contact: str = ""

    def to_document(self) -> dict[str, str]:
        """Serialize with wire field names for the document store."""
        return self.model_dump(by_alias=True)


class Registration(BaseModel):
    """A team's entry into a single event."""

    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    team: str
    event: str
    participants: list[Participant] = Field(default_factory=list)

    @property
    def expected_participants(self) -> int | None:
        return expected_participants(self.event)

    @classmethod
    def from_record(cls, record: Any) -> Registration:
        """Build a Registration from a store record.

        The PocketBase SDK hands back record objects with attribute access,
        but mocks and raw API payloads are plain dicts - accept both.
        """

        def get_field(name: str, default: Any = None) -> Any:
            if isinstance(record, dict):
                return record.get(name, default)
            return getattr(record, name, default)

        raw_participants = get_field("participants") or []
        participants = [
            p if isinstance(p, Participant) else Participant.model_validate(p) for p in raw_participants
        ]

        return cls(
            _id=str(get_field("id") or get_field("_id") or ""),
            team=str(get_field("team", "") or ""),
            event=str(get_field("event", "") or ""),
            participants=participants,
        )
