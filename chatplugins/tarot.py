"""Tarot decks: drawing cards, looking them up and laying out spreads."""

from __future__ import annotations

import json
import random
from dataclasses import dataclass, field
from typing import Optional, Union

IMAGE_BED = "https://gitcode.net/shudorcl/zbp-tarot/-/raw/master/"
REVERSE_DIR = "Reverse/"
MAJOR_COUNT = 22
MINOR_COUNT = 55
MIXED_COUNT = 77
MAX_DRAW = 20
UPRIGHT = "『正位』"
REVERSED = "『逆位』"
REASONS = (
    "您抽到的是~\n",
    "锵锵锵，塔罗牌的预言是~\n",
    "诶，让我看看您抽到了~\n",
)
MIXED = "混合"


@dataclass(frozen=True)
class Card:
    """One tarot card with its upright and reversed meanings."""

    name: str
    description: str = ""
    reverse_description: str = ""
    img_url: str = ""


@dataclass(frozen=True)
class Formation:
    """A spread: how many cards it takes and what each position stands for."""

    cards_num: int
    is_cut: bool = False
    represent: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class Draw:
    """A card as it came out of the deck, upright or reversed."""

    card: Card
    reversed: bool

    @property
    def position(self) -> str:
        return REVERSED if self.reversed else UPRIGHT

    @property
    def description(self) -> str:
        return self.card.reverse_description if self.reversed else self.card.description

    @property
    def image_url(self) -> str:
        return IMAGE_BED + (REVERSE_DIR if self.reversed else "") + self.card.img_url

    @property
    def image_name(self) -> str:
        """Name of the cached picture: reversed cards carry a "Reverse" prefix."""
        return ("Reverse" if self.reversed else "") + self.card.name


def _load(data: Union[str, bytes]) -> object:
    return json.loads(data)


class TarotDeck:
    """The cards, numbered from 0, and the known spreads."""

    def __init__(
        self, cards: dict[int, Card], formations: dict[str, Formation]
    ) -> None:
        self.cards = dict(cards)
        self.formations = dict(formations)
        self.by_name = {card.name: card for card in self.cards.values()}
        self.major_names = [
            self.cards.get(i, Card("")).name for i in range(MAJOR_COUNT)
        ]

    @classmethod
    def from_json(
        cls, cards_json: Union[str, bytes], formations_json: Union[str, bytes]
    ) -> "TarotDeck":
        """Build from the card map and the spread map in their JSON form."""
        cards: dict[int, Card] = {}
        for key, entry in _load(cards_json).items():
            info = entry.get("info") or {}
            cards[int(key)] = Card(
                name=entry.get("name", ""),
                description=info.get("description", ""),
                reverse_description=info.get("reverseDescription", ""),
                img_url=info.get("imgUrl", ""),
            )
        formations = {
            name: Formation(
                cards_num=int(entry.get("cards_num", 0)),
                is_cut=bool(entry.get("is_cut", False)),
                represent=[list(row) for row in entry.get("represent") or []],
            )
            for name, entry in _load(formations_json).items()
        }
        return cls(cards, formations)

    def card_range(self, kind: str) -> tuple[int, int]:
        """(first card number, number of cards) for a kind of deck."""
        if "小" in kind:
            return MAJOR_COUNT, MINOR_COUNT
        if kind == MIXED:
            return 0, MIXED_COUNT
        return 0, MAJOR_COUNT

    def _card(self, number: int) -> Card:
        return self.cards.get(number, Card(""))

    def draw(self, kind: str, n: int, rng: random.Random) -> list[Draw]:
        """Draw ``n`` different cards of ``kind``, each upright or reversed."""
        start, length = self.card_range(kind)
        if n <= 0:
            raise ValueError("张数必须为正")
        if n > length:
            raise ValueError("抽取张数过多")
        used: set[int] = set()
        draws = []
        while len(draws) < n:
            j = rng.randrange(length)
            if j in used:
                continue
            used.add(j)
            reversed_ = rng.randrange(2) == 1
            draws.append(Draw(self._card(j + start), reversed_))
        return draws

    def lookup(self, name: str) -> Optional[Card]:
        """The card of that name, or None."""
        return self.by_name.get(name)

    def card_list_text(self) -> str:
        """The list of card names shown when a lookup finds nothing."""
        major = self.major_names
        return (
            "塔罗牌列表\n大阿尔卡纳:\n"
            + " ".join(major[:7])
            + "\n"
            + " ".join(major[7:14])
            + "\n"
            + " ".join(major[14:22])
            + "\n小阿尔卡纳:\n[圣杯|星币|宝剑|权杖] [0-10|侍从|骑士|王后|国王]"
        )

    def spread(
        self, kind: str, formation: str, rng: random.Random
    ) -> list[tuple[str, Draw]]:
        """Lay out a spread; return (position meaning, draw) for every card.

        An unknown spread raises LookupError listing the known ones.
        """
        info = self.formations.get(formation)
        if info is None:
            raise LookupError(
                f"没有找到{formation}噢~\n现有牌阵列表: \n" + "\n".join(self.formations)
            )
        draws = self.draw(kind, info.cards_num, rng)
        labels = info.represent[0] if info.represent else []
        return [
            (labels[i] if i < len(labels) else "", draw)
            for i, draw in enumerate(draws)
        ]


def parse_draw_count(text: str) -> int:
    """Card count from a "n张" prefix; 1 when empty, at most 20."""
    if not text:
        return 1
    n = int(text.removesuffix("张"))
    if n <= 0:
        raise ValueError("张数必须为正")
    if n > MAX_DRAW:
        raise ValueError("抽取张数过多")
    return n