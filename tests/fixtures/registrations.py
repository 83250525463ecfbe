"""Raw registration documents shaped the way the store returns them."""

from __future__ import annotations


def make_participant(name: str, class_: str = "XII-A", contact: str = "") -> dict[str, str]:
    """Build a raw participant document."""
    return {"name": name, "class": class_, "contact": contact or f"{name.lower()}@example.com"}


def make_record(
    record_id: str,
    team: str,
    event: str,
    participants: list[dict[str, str]] | None = None,
) -> dict:
    """Build a raw registration document."""
    return {
        "id": record_id,
        "team": team,
        "event": event,
        "participants": participants or [],
    }
