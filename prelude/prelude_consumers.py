"""
Eager consumers: each drives a sequence until it returns END.

All of them are plain loops, so sequences of any length run in constant
stack depth.
"""
from typing import Any, Callable

from prelude.prelude_datatypes import END
from prelude.prelude_sequences import Map, _Puller, _dbg, _require_callable, as_sequence


def for_each(seq, fn: Callable[[Any], Any]) -> None:
    """Call `fn` on every value of `seq`, in order."""
    _require_callable("forEach", fn)
    seq = as_sequence(seq)
    puller = _Puller("forEach")
    while True:
        value = puller.pull(seq)
        if value is END:
            break
        fn(value)
    _dbg("forEach()", "items", puller.count)


def _fold_from(puller: _Puller, seq, acc, fn):
    while True:
        value = puller.pull(seq)
        if value is END:
            break
        acc = fn(acc, value)
    _dbg(f"{puller.op}()", "items", puller.count)
    return acc


def reduce(seq, fn: Callable[[Any, Any], Any]) -> Any:
    """Left fold seeded with the first value. END if `seq` is empty."""
    _require_callable("reduce", fn)
    seq = as_sequence(seq)
    puller = _Puller("reduce")
    first = puller.pull(seq)
    if first is END:
        _dbg("reduce()", "empty sequence")
        return END
    return _fold_from(puller, seq, first, fn)


def fold(seq, initial: Any, fn: Callable[[Any, Any], Any]) -> Any:
    """Left fold from `initial`; an empty `seq` gives back `initial`."""
    _require_callable("fold", fn)
    return _fold_from(_Puller("fold"), as_sequence(seq), initial, fn)


def _add(a, b):
    return a + b


def sum_seq(seq) -> Any:
    return reduce(seq, _add)


def _append(items: list, value) -> list:
    items.append(value)
    return items


def collect_list(seq) -> list:
    return _fold_from(_Puller("collectList"), as_sequence(seq), [], _append)


def _increment(x):
    return x + 1


def add_one(seq) -> Map:
    return Map(seq, _increment)


__all__ = [
    "for_each",
    "reduce",
    "fold",
    "sum_seq",
    "collect_list",
    "add_one",
]
