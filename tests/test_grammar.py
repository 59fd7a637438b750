import pytest

from asparserations.grammar import Grammar, Nonterminal, Production, Token


def names(symbols):
    return sorted(s.name for s in symbols)


@pytest.fixture
def dragon_book():
    g = Grammar("S")
    S = g.add_nonterminal("S")
    C = g.add_nonterminal("C")
    c = g.add_token("c")
    d = g.add_token("d")
    S.add_production("1", [C, C])
    C.add_production("1", [c, C])
    C.add_production("2", [d])
    g.compute_first_sets()
    return g


def test_dragon_book_first_sets(dragon_book):
    g = dragon_book
    assert names(g.nonterminal_at("S").first_set) == ["c", "d"]
    assert names(g.nonterminal_at("C").first_set) == ["c", "d"]
    assert names(g.token_at("c").first_set) == ["c"]
    assert names(g.token_at("d").first_set) == ["d"]
    assert not g.nonterminal_at("S").derives_empty_string
    assert not g.nonterminal_at("C").derives_empty_string


def test_dragon_book_accept_first_set(dragon_book):
    assert names(dragon_book.accept.first_set) == ["c", "d"]


def test_start_symbol_reused(dragon_book):
    assert dragon_book.start_symbol is dragon_book.nonterminal_at("S")
    assert [n.name for n in dragon_book.nonterminals] == ["S", "C"]


def test_empty_string_first_sets():
    g = Grammar("foo")
    foo = g.add_token("foo")
    g.add_token("bar")
    e = g.add_nonterminal("e")
    f = g.add_nonterminal("f")
    h = g.add_nonterminal("h")
    i = g.add_nonterminal("i")
    e.add_production("empty", [])
    e.add_production("2nd", [e])
    f.add_production("carry", [e, foo])
    f.add_production("empty", [])
    h.add_production("h's", [h])
    i.add_production("carry2", [f])
    g.compute_first_sets()
    assert names(e.first_set) == []
    assert e.derives_empty_string
    assert names(f.first_set) == ["foo"]
    assert f.derives_empty_string
    assert names(h.first_set) == []
    assert not h.derives_empty_string
    assert names(i.first_set) == ["foo"]
    assert i.derives_empty_string


def test_accept_includes_end_when_start_derives_empty():
    g = Grammar("R")
    g.start_symbol.add_production("empty", [])
    g.compute_first_sets()
    assert g.end in g.accept.first_set


def test_end_and_accept():
    g = Grammar("R")
    assert g.end.name == "end_"
    assert g.end.index == 0
    assert g.accept.name == "accept_"
    root = g.accept.production_at("root_")
    assert root.symbols == [g.start_symbol]


def test_indices_and_duplicates():
    g = Grammar("R")
    a = g.add_token("a")
    b = g.add_token("b")
    assert (a.index, b.index) == (1, 2)
    assert g.add_token("a") is a
    assert [t.name for t in g.tokens] == ["a", "b"]
    n = g.add_nonterminal("N")
    assert (g.start_symbol.index, n.index) == (1, 2)


def test_lookup_missing_raises():
    g = Grammar("R")
    with pytest.raises(KeyError):
        g.token_at("missing")
    with pytest.raises(KeyError):
        g.nonterminal_at("missing")
    with pytest.raises(KeyError):
        g.start_symbol.production_at("missing")


def test_production_validation():
    g = Grammar("R")
    other = Grammar("X")
    t = other.add_token("t")
    with pytest.raises(ValueError):
        g.start_symbol.add_production("bad", [t])
    with pytest.raises(ValueError):
        g.start_symbol.add_production("bad", [None])


def test_production_editing():
    g = Grammar("R")
    a = g.add_token("a")
    b = g.add_token("b")
    p = g.start_symbol.add_production("p", [a])
    p.insert_symbol(0, b)
    assert p.symbols == [b, a]
    p.set_symbol(1, b)
    assert p.symbols == [b, b]
    p.erase_symbol(0)
    assert p.symbols == [b]
    foreign = Grammar("X").add_token("z")
    with pytest.raises(ValueError):
        p.set_symbol(0, foreign)
    with pytest.raises(ValueError):
        p.insert_symbol(0, foreign)


def test_production_indices_and_first_name_wins():
    g = Grammar("R")
    a = g.add_token("a")
    p1 = g.start_symbol.add_production("x", [a])
    p2 = g.start_symbol.add_production("x", [])
    assert (p1.index, p2.index) == (0, 1)
    assert g.start_symbol.production_at("x") is p1
    assert p1 < p2


def test_set_start_symbol():
    g = Grammar("R")
    n = g.add_nonterminal("N")
    g.set_start_symbol(n)
    assert g.start_symbol is n
    assert g.accept.production_at("root_").symbols == [n]
    foreign = Grammar("Y").start_symbol
    g.set_start_symbol(foreign)
    assert g.start_symbol is n


def test_symbol_ordering():
    g = Grammar("R")
    n = g.add_nonterminal("N")
    t2 = g.add_token("b")
    t1 = g.add_token("a")
    ordered = sorted([n, g.start_symbol, t1, t2])
    assert [s.name for s in ordered] == ["b", "a", "R", "N"]
    assert isinstance(ordered[0], Token)
    assert isinstance(ordered[-1], Nonterminal)


def test_production_sort_key_by_nonterminal():
    g = Grammar("R")
    n = g.add_nonterminal("N")
    p_n = n.add_production("p", [])
    p_r = g.start_symbol.add_production("p", [])
    assert sorted([p_n, p_r]) == [p_r, p_n]
    assert isinstance(p_n, Production)
    assert p_n.nonterminal is n