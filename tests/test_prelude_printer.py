import pytest

from prelude.prelude_printer import Printer
from prelude.prelude_datatypes import END, OK, ERR, Response, Accumulator
from prelude.prelude_sequences import ListIter, Range, RangeInclusive, Map, Filter, Enumerate


@pytest.fixture
def printer():
    return Printer()


# Test cases: (id, object, expected_string)
FORMAT_TEST_CASES = [
    ("end", END, "end"),
    ("none", None, "none"),
    ("int", 123, "123"),
    ("float", -1.5, "-1.5"),
    ("bool_true", True, "true"),
    ("bool_false", False, "false"),
    ("str", "hello", '"hello"'),
    ("str_escapes", 'say "hi" \\', '"say \\"hi\\" \\\\"'),
    ("empty_list", [], "[]"),
    ("list", [1, "a", [2, 3]], '[1 "a" [2 3]]'),
    ("pair", (0, "a"), '(0 "a")'),
    ("empty_dict", {}, "{}"),
    ("dict", {"a": 1, "b": END}, '{"a": 1, "b": end}'),
    ("dict_key_with_space", {"a b": 1}, '{"a b": 1}'),
    ("dict_int_key", {1: "x"}, '{1: "x"}'),
    ("name", OK, "ok"),
    ("response_ok", Response(OK, 1234), "ok 1234"),
    ("response_err", Response(ERR, "bad"), 'err "bad"'),
    ("accumulator", Accumulator(), "{out: 0, mul: 1, valid: true}"),
]


@pytest.mark.parametrize(
    "test_id, obj, expected",
    FORMAT_TEST_CASES,
    ids=[t[0] for t in FORMAT_TEST_CASES]
)
def test_pformat(printer, test_id, obj, expected):
    assert printer.pformat(obj) == expected


@pytest.mark.parametrize("seq, expected", [
    (ListIter([]), "<listIter>"),
    (Range(0, 1), "<range>"),
    (RangeInclusive(0, 1), "<rangeInclusive>"),
    (Map(ListIter([]), str), "<map>"),
    (Filter(ListIter([]), bool), "<filter>"),
    (Enumerate(ListIter([])), "<enumerate>"),
])
def test_pformat_sequences(printer, seq, expected):
    assert printer.pformat(seq) == expected
    assert repr(seq) == expected


def test_repr_uses_printer():
    assert repr(Response(OK, [1, 2])) == "ok [1 2]"
    acc = Accumulator(out=12, mul=100, valid=False)
    assert repr(acc) == "{out: 12, mul: 100, valid: false}"


def test_unknown_types_fall_back_to_repr(printer):
    class Thing:
        def __repr__(self):
            return "<thing>"
    assert printer.pformat(Thing()) == "<thing>"
