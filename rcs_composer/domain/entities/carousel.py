from dataclasses import dataclass

from ..exceptions import CardIndexOutOfRangeError, CarouselFullError
from .rich_card import RichCard

MAX_CAROUSEL_CARDS = 10


@dataclass(frozen=True)
class Carousel:
    """Ordered rich cards shown side by side.

    add_card caps the list; a carousel built directly may exceed the cap and
    is then reported by validation.
    """

    cards: tuple[RichCard, ...] = ()

    def __len__(self) -> int:
        return len(self.cards)

    def card_at(self, index: int) -> RichCard:
        self._check_index(index)
        return self.cards[index]

    def add_card(self, card: RichCard | None = None) -> "Carousel":
        if len(self.cards) >= MAX_CAROUSEL_CARDS:
            raise CarouselFullError(MAX_CAROUSEL_CARDS)
        return Carousel(cards=self.cards + (card if card is not None else RichCard(),))

    def remove_card(self, index: int) -> "Carousel":
        self._check_index(index)
        return Carousel(cards=self.cards[:index] + self.cards[index + 1:])

    def replace_card(self, index: int, card: RichCard) -> "Carousel":
        self._check_index(index)
        return Carousel(cards=self.cards[:index] + (card,) + self.cards[index + 1:])

    def move_card(self, index: int, new_index: int) -> "Carousel":
        self._check_index(index)
        self._check_index(new_index)
        cards = list(self.cards)
        cards.insert(new_index, cards.pop(index))
        return Carousel(cards=tuple(cards))

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.cards):
            raise CardIndexOutOfRangeError(index, len(self.cards))
