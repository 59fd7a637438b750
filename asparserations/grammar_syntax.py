"""The grammar of grammar files, built with the grammar API."""

from __future__ import annotations

from typing import Optional, Sequence

from asparserations.grammar import Grammar
from asparserations.json_generator import JSONGenerator
from asparserations.tables import LRTable


def grammar_syntax() -> Grammar:
    """Return the grammar describing the grammar-file syntax."""
    grammar = Grammar("Root")
    bar = grammar.add_token("Bar")
    identifier = grammar.add_token("Identifier")
    prime_identifier = grammar.add_token("Prime_Identifier")
    colon = grammar.add_token("Colon")
    comma = grammar.add_token("Comma")
    semicolon = grammar.add_token("Semicolon")
    tokens_keyword = grammar.add_token("Tokens_Keyword")
    open_bracket = grammar.add_token("Open_Bracket")
    close_bracket = grammar.add_token("Close_Bracket")
    hash_ = grammar.add_token("Hash")

    symbol_list = grammar.add_nonterminal("Symbol_List")
    symbol_list.add_production("main", [identifier, symbol_list])
    symbol_list.add_production("explicit_tok", [prime_identifier, symbol_list])
    symbol_list.add_production("empty", [])

    production = grammar.add_nonterminal("Production")
    production.add_production("main", [symbol_list, hash_, identifier])

    production_list = grammar.add_nonterminal("Production_List")
    production_list.add_production(
        "recursive_case", [production, bar, production_list]
    )
    production_list.add_production("base_case", [production, semicolon])

    nonterminal = grammar.add_nonterminal("Nonterminal")
    nonterminal.add_production("main", [identifier, colon, production_list])

    nonterminal_list = grammar.add_nonterminal("Nonterminal_List")
    nonterminal_list.add_production("main", [nonterminal, nonterminal_list])
    nonterminal_list.add_production("empty", [])

    identifier_list = grammar.add_nonterminal("Identifier_List")
    identifier_list.add_production(
        "recursive_case", [identifier, comma, identifier_list]
    )
    identifier_list.add_production("base_case", [identifier])

    grammar.start_symbol.add_production(
        "main",
        [tokens_keyword, open_bracket, identifier_list, close_bracket, nonterminal_list],
    )
    return grammar


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print the LR(1) table of the grammar-file syntax as JSON."""
    table = LRTable(grammar_syntax())
    print(JSONGenerator(table, True).code())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())