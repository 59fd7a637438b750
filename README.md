# asparserations

Build canonical LR(1) or LALR(1) parse tables for a context-free grammar
and write the grammar together with its table as JSON, ready for a
parser generator to turn into code.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Describing a grammar

A `Grammar` (in `asparserations.grammar`) is created with the name of its
root nonterminal. Tokens and nonterminals are added by name; adding a name
twice returns the symbol already there. Each nonterminal gets named
productions, each a list of symbols.

```python
from asparserations.grammar import Grammar

grammar = Grammar("S")
S = grammar.add_nonterminal("S")   # the root, already created
C = grammar.add_nonterminal("C")
c = grammar.add_token("c")
d = grammar.add_token("d")

S.add_production("1", [C, C])
C.add_production("1", [c, C])
C.add_production("2", [d])
```

Symbols can be looked up again with `grammar.token_at(name)` and
`grammar.nonterminal_at(name)` (a `KeyError` if absent), productions with
`nonterminal.production_at(name)`. The root can be changed with
`grammar.set_start_symbol(nonterminal)`. Every grammar also carries an
implicit `end_` token (`grammar.end`) and an `accept_` nonterminal
(`grammar.accept`) with the single production `root_`.

A production's symbols can be edited with `set_symbol`, `insert_symbol`
and `erase_symbol`; a symbol from another grammar raises `ValueError`.

`grammar.compute_first_sets()` fills in `first_set` and
`derives_empty_string` of every symbol; the table builders call it for you.

## Building a table

```python
from asparserations.tables import LALRTable, LRTable

lr = LRTable(grammar)      # canonical LR(1)
lalr = LALRTable(grammar)  # LALR(1): LR(1) states merged by item cores
```

A table has `grammar`, `states` and `item_set_state_pairs` (the kernel
`ItemSet` behind each `State`). Each `State` has an `index`, `shifts`
(token to state), `reductions` (token to a set of productions) and
`gotos` (nonterminal to state); `sorted_actions()` and `sorted_gotos()`
give them in a fixed order. Conflicts are not resolved: a token may have
both a shift and several reductions, and the consumer of the table
decides what to do.

The helpers `closure(item_set)` and `gotos(items)` from
`asparserations.tables` expose the two steps of the construction. The
item types they work on, `Item`, `ItemCore`, `ItemSet` and `LALRState`,
live in `asparserations.items`.

## Writing JSON

```python
from asparserations.json_generator import JSONGenerator

generator = JSONGenerator(lr, True, False, "  ")
with open("a.out.json", "w") as out:
    out.write(generator.code())
```

The arguments are the table, whether to pretty-print, whether to include
each state's kernel item set (`"itemSet"`, otherwise `null`), and the
indentation string.

The document has two members:

- `"grammar"`: `"tokens"`, a list of token names starting with `end_`, and
  `"nonterminals"`, mapping each nonterminal (starting with `accept_`) to
  its productions, each a list of `{"name", "isToken"}` objects.
- `"table"`: a list of states, each with `"index"`, `"actions"` (token to
  `{"shift", "reductions"}`), `"gotos"` (nonterminal to state index) and
  `"itemSet"`.

## The grammar of grammar files

`asparserations.grammar_syntax.grammar_syntax()` returns the grammar that
describes grammar files themselves: a `tokens { ... }` block followed by
nonterminals with `#`-named productions separated by `|` and ended by `;`.

The command

```
asparserations-bootstrap-json > grammar_syntax.json
```

builds the LR(1) table for that grammar and prints it as pretty-printed
JSON.

## What this package does not do

It does not read grammar files. There is no lexer or parser for the
grammar-file syntax and no command that takes a grammar file and writes
its table; grammars are built in Python through `Grammar`, and tables are
written with `JSONGenerator` as shown above.