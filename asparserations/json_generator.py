"""Serialise a grammar and its parse table as JSON text."""

from __future__ import annotations

from typing import Callable, Iterable, Optional, TypeVar

from asparserations.grammar import Nonterminal, Token
from asparserations.items import ItemSet
from asparserations.tables import State, Table

_T = TypeVar("_T")


class JSONGenerator:
    """Builds the JSON description of a table and the grammar behind it."""

    def __init__(
        self,
        table: Table,
        pretty_print: bool = True,
        debug: bool = False,
        tab: str = "  ",
    ) -> None:
        self.table = table
        self.grammar = table.grammar
        self.pretty_print = pretty_print
        self.debug = debug
        self.tab = tab
        self._parts: list[str] = []
        self._depth = 0
        self._generate()
        self._code = "".join(self._parts)

    def code(self) -> str:
        """The generated JSON text."""
        return self._code

    def _emit(self, text: str) -> None:
        self._parts.append(text)

    def _break(self) -> None:
        if self.pretty_print:
            self._parts.append("\n" + self.tab * self._depth)

    def _open(self, text: str) -> None:
        self._emit(text)
        self._depth += 1

    def _close(self, text: str) -> None:
        self._depth -= 1
        self._break()
        self._emit(text)

    def _each(self, values: Iterable[_T], write: Callable[[_T], None]) -> None:
        for position, value in enumerate(values):
            if position:
                self._emit(",")
            write(value)

    def _generate(self) -> None:
        self._open("{")
        self._break()
        self._emit('"grammar" : ')
        self._generate_grammar()
        self._emit(",")
        self._break()
        self._emit('"table" : ')
        self._generate_table()
        self._close("}")

    def _generate_token(self, token: Token) -> None:
        self._break()
        self._emit(f'"{token.name}"')

    def _generate_nonterminal(self, nonterminal: Nonterminal) -> None:
        self._open(f'"{nonterminal.name}" : {{')

        def write_symbol(symbol) -> None:
            self._break()
            self._open("{")
            self._break()
            self._emit(f'"name" : "{symbol.name}",')
            self._break()
            self._emit(f'"isToken" : {"true" if symbol.is_token else "false"}')
            self._close("}")

        def write_production(production) -> None:
            self._break()
            self._open(f'"{production.name}" : [')
            self._each(production.symbols, write_symbol)
            self._close("]")

        self._each(nonterminal.productions, write_production)
        self._close("}")

    def _generate_grammar(self) -> None:
        self._open("{")
        self._break()
        self._open('"tokens" : [')
        self._each([self.grammar.end, *self.grammar.tokens], self._generate_token)
        self._close("],")
        self._break()
        self._open('"nonterminals" : {')

        def write_nonterminal(nonterminal: Nonterminal) -> None:
            self._break()
            self._generate_nonterminal(nonterminal)

        self._each(
            [self.grammar.accept, *self.grammar.nonterminals], write_nonterminal
        )
        self._close("}")
        self._close("}")

    def _generate_actions(self, state: State) -> None:
        self._open("{")

        def write_reduction(production) -> None:
            self._break()
            self._open("{")
            self._break()
            self._emit(f'"nonterminal" : "{production.nonterminal.name}",')
            self._break()
            self._emit(f'"production" : "{production.name}"')
            self._close("}")

        def write_action(action) -> None:
            token, shift, reductions = action
            self._break()
            self._open(f'"{token.name}" : {{')
            self._break()
            target = "null" if shift is None else str(shift.index)
            self._emit(f'"shift" : {target},')
            self._break()
            self._open('"reductions" : [')
            self._each(reductions, write_reduction)
            self._close("]")
            self._close("}")

        self._each(state.sorted_actions(), write_action)
        self._close("}")

    def _generate_gotos(self, state: State) -> None:
        self._open("{")

        def write_goto(pair) -> None:
            nonterminal, target = pair
            self._break()
            self._emit(f'"{nonterminal.name}" : {target.index}')

        self._each(state.sorted_gotos(), write_goto)
        self._close("}")

    def _generate_item_set(self, item_set: ItemSet) -> None:
        self._open("[")

        def write_item(item) -> None:
            self._break()
            self._open("{")
            self._break()
            self._open('"production" : {')
            self._break()
            self._emit(f'"nonterminal" : "{item.production.nonterminal.name}",')
            self._break()
            self._emit(f'"production" : "{item.production.name}"')
            self._close("},")
            self._break()
            self._emit(f'"marker" : {item.marker},')
            self._break()
            self._emit(f'"lookahead" : "{item.lookahead.name}"')
            self._close("}")

        self._each(item_set.sorted_items(), write_item)
        self._close("]")

    def _generate_state(self, state: State, item_set: Optional[ItemSet]) -> None:
        self._open("{")
        self._break()
        self._emit(f'"index" : {state.index},')
        self._break()
        self._emit('"actions" : ')
        self._generate_actions(state)
        self._emit(",")
        self._break()
        self._emit('"gotos" : ')
        self._generate_gotos(state)
        self._emit(",")
        self._break()
        self._emit('"itemSet" : ')
        if item_set is None:
            self._emit("null")
        else:
            self._generate_item_set(item_set)
        self._close("}")

    def _generate_table(self) -> None:
        self._open("[")

        def write_pair(pair) -> None:
            item_set, state = pair
            self._break()
            self._generate_state(state, item_set if self.debug else None)

        self._each(self.table.item_set_state_pairs, write_pair)
        self._close("]")