"""
Suggested replies and suggested actions attached to a rich card.

A card holds either replies or actions, never both. The three states are
separate types; adding the first entry of a kind locks the set to that kind
and removing the last entry unlocks it again.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar

from ..exceptions import (
    CardinalityExceededError,
    IndexOutOfRangeError,
    MixedSuggestionKindsError,
)
from .action import SuggestedAction

MAX_SUGGESTIONS = 4


class SuggestionKind(str, Enum):
    REPLIES = "replies"
    ACTIONS = "actions"


@dataclass(frozen=True)
class SuggestionSet:
    """Common operations; every edit returns a new set."""

    kind: ClassVar[SuggestionKind | None] = None

    @property
    def items(self) -> tuple:
        return ()

    def __len__(self) -> int:
        return len(self.items)

    def add_reply(self, text: str) -> "SuggestionSet":
        self._check_can_add(SuggestionKind.REPLIES)
        return SuggestedReplies(replies=self.items + (text,))

    def add_action(self, action: SuggestedAction) -> "SuggestionSet":
        self._check_can_add(SuggestionKind.ACTIONS)
        return SuggestedActions(actions=self.items + (action,))

    def remove(self, index: int) -> "SuggestionSet":
        self._check_index(index)
        items = self.items
        return self._with_items(items[:index] + items[index + 1:])

    def move(self, index: int, new_index: int) -> "SuggestionSet":
        self._check_index(index)
        self._check_index(new_index)
        items = list(self.items)
        items.insert(new_index, items.pop(index))
        return self._with_items(tuple(items))

    def update(self, index: int, value: Any) -> "SuggestionSet":
        self._check_index(index)
        attempted = (
            SuggestionKind.ACTIONS if isinstance(value, SuggestedAction) else SuggestionKind.REPLIES
        )
        if attempted is not self.kind:
            raise MixedSuggestionKindsError(self.kind.value, attempted.value)
        items = self.items
        return self._with_items(items[:index] + (value,) + items[index + 1:])

    def clear(self) -> "SuggestionSet":
        return EmptySuggestions()

    def _with_items(self, items: tuple) -> "SuggestionSet":
        if not items:
            return EmptySuggestions()
        if self.kind is SuggestionKind.ACTIONS:
            return SuggestedActions(actions=items)
        return SuggestedReplies(replies=items)

    def _check_can_add(self, attempted: SuggestionKind) -> None:
        if self.kind is not None and self.kind is not attempted and len(self):
            raise MixedSuggestionKindsError(self.kind.value, attempted.value)
        if len(self) >= MAX_SUGGESTIONS:
            raise CardinalityExceededError(MAX_SUGGESTIONS)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self):
            raise IndexOutOfRangeError(index, len(self))


@dataclass(frozen=True)
class EmptySuggestions(SuggestionSet):
    """No suggestions; accepts either kind next."""


@dataclass(frozen=True)
class SuggestedReplies(SuggestionSet):
    kind: ClassVar[SuggestionKind | None] = SuggestionKind.REPLIES
    replies: tuple[str, ...] = ()

    @property
    def items(self) -> tuple[str, ...]:
        return self.replies


@dataclass(frozen=True)
class SuggestedActions(SuggestionSet):
    kind: ClassVar[SuggestionKind | None] = SuggestionKind.ACTIONS
    actions: tuple[SuggestedAction, ...] = ()

    @property
    def items(self) -> tuple[SuggestedAction, ...]:
        return self.actions
