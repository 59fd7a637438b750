"""Context-free grammars: tokens, nonterminals, productions and FIRST sets."""

from __future__ import annotations

from typing import Iterable


class Symbol:
    """A grammar symbol: either a token or a nonterminal."""

    is_token: bool = False

    def __init__(self, grammar: Grammar, name: str, index: int) -> None:
        self.grammar = grammar
        self.name = name
        self.index = index
        self.first_set: set[Token] = set()

    @property
    def productions(self) -> list[Production]:
        return []

    @property
    def derives_empty_string(self) -> bool:
        return False

    def sort_key(self) -> tuple[int, int, int]:
        """Order by grammar, then tokens before nonterminals, then index."""
        return (id(self.grammar), 0 if self.is_token else 1, self.index)

    def __lt__(self, other: Symbol) -> bool:
        return self.sort_key() < other.sort_key()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class Token(Symbol):
    """A terminal symbol; its FIRST set is itself."""

    is_token = True

    def __init__(self, grammar: Grammar, name: str, index: int) -> None:
        super().__init__(grammar, name, index)
        self.first_set = {self}


class Nonterminal(Symbol):
    """A nonterminal symbol with an ordered list of named productions."""

    is_token = False

    def __init__(self, grammar: Grammar, name: str, index: int) -> None:
        super().__init__(grammar, name, index)
        self._productions: list[Production] = []
        self._production_map: dict[str, Production] = {}
        self._derives_empty_string = False

    @property
    def productions(self) -> list[Production]:
        return self._productions

    @property
    def derives_empty_string(self) -> bool:
        return self._derives_empty_string

    def add_production(self, name: str, symbols: Iterable[Symbol]) -> Production:
        """Append a production; an existing name keeps its first binding."""
        production = Production(self, name, symbols, len(self._productions))
        self._productions.append(production)
        self._production_map.setdefault(name, production)
        return production

    def production_at(self, name: str) -> Production:
        """Return the production with this name, raising KeyError if absent."""
        return self._production_map[name]


class Production:
    """A named right-hand side of a nonterminal."""

    def __init__(
        self,
        nonterminal: Nonterminal,
        name: str,
        symbols: Iterable[Symbol],
        index: int,
    ) -> None:
        self.nonterminal = nonterminal
        self.name = name
        self.index = index
        self.symbols: list[Symbol] = list(symbols)
        for symbol in self.symbols:
            if symbol is None:
                raise ValueError("Symbol is null")
            self._check_grammar(symbol)

    def _check_grammar(self, symbol: Symbol) -> None:
        if symbol.grammar is not self.nonterminal.grammar:
            raise ValueError("Symbol does not belong to the same grammar")

    def sort_key(self) -> tuple:
        return (self.nonterminal.sort_key(), self.index)

    def __lt__(self, other: Production) -> bool:
        return self.sort_key() < other.sort_key()

    def set_symbol(self, index: int, symbol: Symbol) -> None:
        self._check_grammar(symbol)
        self.symbols[index] = symbol

    def insert_symbol(self, index: int, symbol: Symbol) -> None:
        self._check_grammar(symbol)
        self.symbols.insert(index, symbol)

    def erase_symbol(self, index: int) -> None:
        """Remove the symbol at this position; IndexError if out of range."""
        count = len(self.symbols)
        if not -count <= index < count:
            raise IndexError(
                f"symbol index {index} out of range for production "
                f"{self.name!r} with {count} symbols"
            )
        self.symbols.pop(index)

    def __repr__(self) -> str:
        return f"Production({self.nonterminal.name!r}, {self.name!r})"


class Grammar:
    """A grammar with an augmented start rule ``accept_ -> start``."""

    def __init__(self, start: str) -> None:
        self._tokens: dict[str, Token] = {}
        self._nonterminals: dict[str, Nonterminal] = {}
        self.end = Token(self, "end_", 0)
        self.accept = Nonterminal(self, "accept_", 0)
        self.start_symbol = self.add_nonterminal(start)
        self.accept.add_production("root_", [self.start_symbol])

    @property
    def tokens(self) -> list[Token]:
        """Tokens in the order they were added (excluding the end token)."""
        return list(self._tokens.values())

    @property
    def nonterminals(self) -> list[Nonterminal]:
        """Nonterminals in the order they were added (excluding accept)."""
        return list(self._nonterminals.values())

    def add_token(self, name: str) -> Token:
        """Add a token, or return the existing one with this name."""
        token = self._tokens.get(name)
        if token is None:
            token = Token(self, name, len(self._tokens) + 1)
            self._tokens[name] = token
        return token

    def add_nonterminal(self, name: str) -> Nonterminal:
        """Add a nonterminal, or return the existing one with this name."""
        nonterminal = self._nonterminals.get(name)
        if nonterminal is None:
            nonterminal = Nonterminal(self, name, len(self._nonterminals) + 1)
            self._nonterminals[name] = nonterminal
        return nonterminal

    def token_at(self, name: str) -> Token:
        return self._tokens[name]

    def nonterminal_at(self, name: str) -> Nonterminal:
        return self._nonterminals[name]

    def set_start_symbol(self, nonterminal: Nonterminal) -> None:
        """Change the start symbol; ignored if it belongs to another grammar."""
        if nonterminal.grammar is self:
            self.start_symbol = nonterminal
            self.accept.production_at("root_").set_symbol(0, nonterminal)

    def compute_first_sets(self) -> None:
        """Compute FIRST sets; call only once the grammar is complete."""
        ordered = [self._nonterminals[name] for name in sorted(self._nonterminals)]
        needs_update = True
        while needs_update:
            needs_update = False
            for nonterminal in ordered:
                for production in nonterminal.productions:
                    derives_empty = True
                    for symbol in production.symbols:
                        new = symbol.first_set - nonterminal.first_set
                        if new:
                            nonterminal.first_set |= new
                            needs_update = True
                        if not symbol.derives_empty_string:
                            derives_empty = False
                            break
                    if derives_empty:
                        nonterminal._derives_empty_string = True
        if self.start_symbol is not None:
            self.accept.first_set = set(self.start_symbol.first_set)
            if self.start_symbol.derives_empty_string:
                self.accept.first_set.add(self.end)