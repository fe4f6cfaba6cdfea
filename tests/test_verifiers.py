from rulepass.verifiers import excluding, no_adjacent_repeats


def test_no_adjacent_repeats():
    assert no_adjacent_repeats("abab")
    assert not no_adjacent_repeats("abba")
    assert not no_adjacent_repeats("$$")
    # same character, just not adjacent
    assert no_adjacent_repeats("a1a1a")


def test_no_adjacent_repeats_trivial_inputs():
    assert no_adjacent_repeats("")
    assert no_adjacent_repeats("x")


def test_no_adjacent_repeats_is_pure():
    for pw in ("Xy!9Xy", "aa", "Q"):
        assert no_adjacent_repeats(pw) == no_adjacent_repeats(pw)


def test_excluding():
    no_dollar = excluding("$")
    assert no_dollar("abc!")
    assert not no_dollar("ab$c")
    no_quotes = excluding("`'\"")
    assert not no_quotes("a`b")
    assert no_quotes("")
