import re
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from urllib.parse import urlparse


class ActionType(str, Enum):
    """Tag of a suggested action chip."""
    TEXT = "text"
    DIAL = "dial"
    VIEW_LOCATION = "view_location"
    SHARE_LOCATION = "share_location"
    OPEN_URL = "open_url"
    CREATE_CALENDAR_EVENT = "create_calendar_event"


# What the value of each action carries, shown next to the input field.
ACTION_VALUE_LABELS: dict[ActionType, str] = {
    ActionType.TEXT: "reply text",
    ActionType.DIAL: "phone number",
    ActionType.VIEW_LOCATION: "location query or coordinates",
    ActionType.SHARE_LOCATION: "label",
    ActionType.OPEN_URL: "URL",
    ActionType.CREATE_CALENDAR_EVENT: "event title",
}

_PHONE_PATTERN = re.compile(r"^\+?[0-9(][0-9()\-.\s]*$")


def _any_text(value: str) -> str | None:
    return None


def _phone_number(value: str) -> str | None:
    digits = sum(ch.isdigit() for ch in value)
    if not _PHONE_PATTERN.match(value.strip()) or digits < 3:
        return f"'{value}' is not a valid phone number"
    return None


def _absolute_url(value: str) -> str | None:
    parsed = urlparse(value.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return f"'{value}' is not an absolute http(s) URL"
    return None


# Semantic check per action tag; returns a problem description or None.
ACTION_VALUE_RULES: dict[ActionType, Callable[[str], str | None]] = {
    ActionType.TEXT: _any_text,
    ActionType.DIAL: _phone_number,
    ActionType.VIEW_LOCATION: _any_text,
    ActionType.SHARE_LOCATION: _any_text,
    ActionType.OPEN_URL: _absolute_url,
    ActionType.CREATE_CALENDAR_EVENT: _any_text,
}


@dataclass(frozen=True)
class SuggestedAction:
    """Immutable action chip: a tag plus its string value."""
    type: ActionType = ActionType.TEXT
    value: str = ""

    @property
    def label(self) -> str:
        return ACTION_VALUE_LABELS[self.type]

    def value_problem(self) -> str | None:
        """Describe why the value does not fit the tag, if it does not."""
        return ACTION_VALUE_RULES[self.type](self.value)
