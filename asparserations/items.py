"""LR(1) items, item cores, item sets and LALR state bookkeeping."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Iterator

from asparserations.grammar import Production, Symbol, Token

if TYPE_CHECKING:
    from asparserations.tables import State


@dataclass(frozen=True)
class Item:
    """A production with a marker position and a lookahead token."""

    production: Production
    marker: int
    lookahead: Token

    def next(self) -> Symbol:
        """The symbol right after the marker; IndexError if at the end."""
        return self.production.symbols[self.marker]

    def peek(self) -> Symbol:
        """The symbol after the next one; IndexError if there is none."""
        return self.production.symbols[self.marker + 1]

    @property
    def at_end(self) -> bool:
        return self.marker >= len(self.production.symbols)

    def core(self) -> ItemCore:
        """The item without its lookahead."""
        return ItemCore(self.production, self.marker)

    def sort_key(self) -> tuple:
        """Order by marker, then production, then lookahead."""
        return (self.marker, self.production.sort_key(), self.lookahead.sort_key())

    def __lt__(self, other: Item) -> bool:
        return self.sort_key() < other.sort_key()


@dataclass(frozen=True)
class ItemCore:
    """A production with a marker position, lookahead left out."""

    production: Production
    marker: int

    def sort_key(self) -> tuple:
        """Order by marker, then production."""
        return (self.marker, self.production.sort_key())

    def __lt__(self, other: ItemCore) -> bool:
        return self.sort_key() < other.sort_key()


class ItemSet:
    """A mutable set of items."""

    def __init__(self, items: Iterable[Item] = ()) -> None:
        self.items: set[Item] = set(items)

    def insert(self, item: Item) -> None:
        self.items.add(item)

    def merge(self, other: ItemSet | Iterable[Item]) -> bool:
        """Add every item of ``other``; return whether anything was new."""
        incoming = other.items if isinstance(other, ItemSet) else set(other)
        new = incoming - self.items
        self.items |= new
        return bool(new)

    def sorted_items(self) -> list[Item]:
        """The items in their canonical order."""
        return sorted(self.items, key=Item.sort_key)

    def __iter__(self) -> Iterator[Item]:
        return iter(self.sorted_items())

    def __len__(self) -> int:
        return len(self.items)

    def __contains__(self, item: object) -> bool:
        return item in self.items

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ItemSet):
            return NotImplemented
        return self.items == other.items

    __hash__ = None  # type: ignore[assignment]

    def __lt__(self, other: ItemSet) -> bool:
        return [i.sort_key() for i in self.sorted_items()] < [
            i.sort_key() for i in other.sorted_items()
        ]

    def __repr__(self) -> str:
        return f"ItemSet({self.sorted_items()!r})"


class LALRState:
    """A parser state together with the merged item set it stands for."""

    def __init__(self, state: State, item_set: ItemSet | None = None) -> None:
        self.state = state
        self.item_set = item_set if item_set is not None else ItemSet()

    def merge(self, items: Iterable[Item]) -> bool:
        """Merge items into the state's set; return whether it grew."""
        return self.item_set.merge(items)

    def __repr__(self) -> str:
        return f"LALRState({self.state!r}, {self.item_set!r})"