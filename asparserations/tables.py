"""Parser states and canonical LR(1) and LALR(1) table construction."""

from __future__ import annotations

from typing import Iterable, Optional

from asparserations.grammar import Grammar, Nonterminal, Production, Symbol, Token
from asparserations.items import Item, ItemCore, ItemSet, LALRState


class State:
    """A parser state: shifts and reductions per token, gotos per nonterminal."""

    def __init__(self, index: int) -> None:
        self.index = index
        self.shifts: dict[Token, State] = {}
        self.reductions: dict[Token, set[Production]] = {}
        self.gotos: dict[Nonterminal, State] = {}

    def add_transition(self, symbol: Symbol, state: State) -> None:
        """Shift on a token, or go to ``state`` on a nonterminal."""
        if symbol.is_token:
            self.shifts[symbol] = state
        else:
            self.gotos[symbol] = state

    def add_reductions(self, reductions: dict[Token, Iterable[Production]]) -> None:
        for token, productions in reductions.items():
            self.reductions.setdefault(token, set()).update(productions)

    def sorted_actions(
        self,
    ) -> list[tuple[Token, Optional[State], list[Production]]]:
        """(token, shift target or None, sorted reductions), ordered by token."""
        tokens = sorted(set(self.shifts) | set(self.reductions), key=Token.sort_key)
        return [
            (
                token,
                self.shifts.get(token),
                sorted(self.reductions.get(token, ()), key=Production.sort_key),
            )
            for token in tokens
        ]

    def sorted_gotos(self) -> list[tuple[Nonterminal, State]]:
        """(nonterminal, target) pairs ordered by nonterminal."""
        return sorted(self.gotos.items(), key=lambda pair: pair[0].sort_key())

    def __repr__(self) -> str:
        return f"State({self.index})"


def closure(item_set: ItemSet | Iterable[Item]) -> set[Item]:
    """Compute the closed set of items from a kernel."""
    items = set(item_set.items if isinstance(item_set, ItemSet) else item_set)
    pending = list(items)
    while pending:
        item = pending.pop()
        if item.at_end:
            continue
        # Lookaheads come from the symbol right after the next one only.
        if item.marker + 1 < len(item.production.symbols):
            follower = item.peek()
            lookaheads = set(follower.first_set)
            inherits = follower.derives_empty_string
        else:
            lookaheads = set()
            inherits = True
        if inherits:
            lookaheads.add(item.lookahead)
        for production in item.next().productions:
            for lookahead in lookaheads:
                new = Item(production, 0, lookahead)
                if new not in items:
                    items.add(new)
                    pending.append(new)
    return items


def gotos(
    items: Iterable[Item],
) -> tuple[dict[Symbol, set[Item]], dict[Token, set[Production]]]:
    """Advance the marker of each item, or collect its reduction.

    Returns the kernels reached per symbol and the productions to reduce per
    lookahead token, both ordered by symbol.
    """
    transitions: dict[Symbol, set[Item]] = {}
    reductions: dict[Token, set[Production]] = {}
    for item in items:
        if item.at_end:
            reductions.setdefault(item.lookahead, set()).add(item.production)
        else:
            transitions.setdefault(item.next(), set()).add(
                Item(item.production, item.marker + 1, item.lookahead)
            )
    return (
        dict(sorted(transitions.items(), key=lambda pair: pair[0].sort_key())),
        dict(sorted(reductions.items(), key=lambda pair: pair[0].sort_key())),
    )


class Table:
    """A parse table: its grammar, states and the item set behind each state."""

    def __init__(self, grammar: Grammar) -> None:
        self.grammar = grammar
        self.states: list[State] = []
        self.item_set_state_pairs: list[tuple[ItemSet, State]] = []
        grammar.compute_first_sets()

    def _new_state(self, item_set: ItemSet) -> State:
        state = State(len(self.states))
        self.states.append(state)
        self.item_set_state_pairs.append((item_set, state))
        return state

    def _start_item(self) -> Item:
        root = self.grammar.accept.production_at("root_")
        return Item(root, 0, self.grammar.end)


class LRTable(Table):
    """Canonical LR(1) table."""

    def __init__(self, grammar: Grammar) -> None:
        super().__init__(grammar)
        start_set = ItemSet([self._start_item()])
        start_state = self._new_state(start_set)
        known: dict[frozenset[Item], State] = {frozenset(start_set.items): start_state}
        queue: list[tuple[ItemSet, State]] = [(start_set, start_state)]
        for item_set, state in queue:
            transitions, reductions = gotos(closure(item_set))
            for symbol, kernel in transitions.items():
                key = frozenset(kernel)
                target = known.get(key)
                if target is None:
                    target_set = ItemSet(kernel)
                    target = self._new_state(target_set)
                    known[key] = target
                    queue.append((target_set, target))
                state.add_transition(symbol, target)
            state.add_reductions(reductions)


class LALRTable(Table):
    """LALR(1) table: LR(1) states with equal cores merged."""

    def __init__(self, grammar: Grammar) -> None:
        super().__init__(grammar)
        start_item = self._start_item()
        start_set = ItemSet([start_item])
        start = LALRState(self._new_state(start_set), start_set)
        known: dict[frozenset[ItemCore], LALRState] = {
            frozenset([start_item.core()]): start
        }
        queue: list[LALRState] = [start]
        for current in queue:
            transitions, reductions = gotos(closure(current.item_set))
            for symbol, kernel in transitions.items():
                cores = frozenset(item.core() for item in kernel)
                target = known.get(cores)
                if target is None:
                    item_set = ItemSet()
                    target = LALRState(self._new_state(item_set), item_set)
                    known[cores] = target
                if target.merge(kernel):
                    queue.append(target)
                current.state.add_transition(symbol, target.state)
            current.state.add_reductions(reductions)