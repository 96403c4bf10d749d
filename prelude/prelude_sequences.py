"""
The lazy sequence protocol and the sequences built directly on it.

A sequence is a single-owner, stateful object whose `advance()` returns
either the next value or `END`. Every sequence here latches: once `END`
has been returned, every later call returns `END` again without touching
the sequence's own state or its upstream.
"""
import collections.abc
import os
import sys
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

from prelude.prelude_datatypes import END, clone


def _dbg(*parts):
    if os.environ.get("PRELUDE_DEBUG"):
        try:
            print("[DBG]", *parts, file=sys.stderr)
        except Exception:
            pass


def _max_loop_iters() -> Optional[int]:
    """Optional safety cap on pulls per loop, read from PRELUDE_MAX_LOOP_ITERS."""
    raw = os.environ.get("PRELUDE_MAX_LOOP_ITERS")
    if raw is None:
        return None
    try:
        limit = int(raw)
    except ValueError:
        return None
    return limit if limit > 0 else None


class _Puller:
    """Pulls values from a sequence for one loop, enforcing PRELUDE_MAX_LOOP_ITERS.

    Every value pulled counts; the final END does not. Pulling one value more
    than the cap raises before that value is handed to the loop body.
    """
    def __init__(self, op: str):
        self.op = op
        self.limit = _max_loop_iters()
        self.count = 0

    def pull(self, seq: "Sequence") -> Any:
        value = seq.advance()
        if value is END:
            return END
        self.count += 1
        if self.limit is not None and self.count > self.limit:
            raise RuntimeError(f"{self.op}: iteration limit exceeded")
        return value


# ===================================================================
# 1. Protocol
# ===================================================================

class Sequence(ABC):
    """Base class for every prelude sequence."""

    # Name the sequence is bound under in the script prelude.
    script_name = "sequence"

    def __init__(self):
        self._exhausted = False

    @abstractmethod
    def _next(self) -> Any:
        """Produce the next value or END. Never called again after END."""
        raise NotImplementedError

    def advance(self) -> Any:
        if self._exhausted:
            return END
        value = self._next()
        if value is END:
            self._exhausted = True
        return value

    @property
    def exhausted(self) -> bool:
        return self._exhausted

    # Script code calls a sequence with no arguments.
    def __call__(self) -> Any:
        return self.advance()

    def __iter__(self):
        return self

    def __next__(self):
        value = self.advance()
        if value is END:
            raise StopIteration
        return value

    def __repr__(self) -> str:
        from prelude.prelude_printer import Printer
        return Printer().pformat(self)


class FnSequence(Sequence):
    """Adapts a zero-argument callable returning a value or END."""
    script_name = "fn"

    def __init__(self, fn: Callable[[], Any]):
        super().__init__()
        if not callable(fn):
            raise TypeError(f"sequence function must be callable, not {type(fn).__name__}")
        self.fn = fn

    def _next(self):
        return self.fn()


def as_sequence(obj: Any) -> Sequence:
    if isinstance(obj, Sequence):
        return obj
    if callable(obj):
        return FnSequence(obj)
    raise TypeError(f"expected a sequence or a zero-argument function, not {type(obj).__name__}")


def _require_callable(op: str, fn: Any):
    if not callable(fn):
        raise TypeError(f"{op} requires a function, not {type(fn).__name__}")


# ===================================================================
# 2. Sources
# ===================================================================

class ListIter(Sequence):
    """Walks a list front to back. Elements are read at call time, not snapshotted."""
    script_name = "listIter"

    def __init__(self, items):
        super().__init__()
        if not isinstance(items, list):
            raise TypeError(f"listIter expects a list, not {type(items).__name__}")
        self.items = items
        self.cursor = 0

    def _next(self):
        if self.cursor < len(self.items):
            index = clone(self.cursor)
            self.cursor += 1
            return self.items[index]
        return END


class RevListIter(Sequence):
    """Pops from the tail of a list until it is empty. The list is consumed."""
    script_name = "revListIter"

    def __init__(self, items):
        super().__init__()
        if not isinstance(items, collections.abc.MutableSequence):
            raise TypeError(f"revListIter expects a mutable list, not {type(items).__name__}")
        self.items = items

    def _next(self):
        if len(self.items) == 0:
            return END
        return self.items.pop()


class Range(Sequence):
    """start, start+1, ..., end-1."""
    script_name = "range"

    def __init__(self, start, end):
        super().__init__()
        self.counter = start
        self.end = end

    def _in_bounds(self) -> bool:
        return self.counter < self.end

    def _next(self):
        if not self._in_bounds():
            return END
        value = clone(self.counter)
        self.counter += 1
        return value


class RangeInclusive(Range):
    """start, start+1, ..., end."""
    script_name = "rangeInclusive"

    def _in_bounds(self) -> bool:
        return self.counter <= self.end


# ===================================================================
# 3. Combinators
# ===================================================================

class Map(Sequence):
    script_name = "map"

    def __init__(self, source, fn: Callable[[Any], Any]):
        super().__init__()
        _require_callable("map", fn)
        self.source = as_sequence(source)
        self.fn = fn

    def _next(self):
        value = self.source.advance()
        if value is END:
            return END
        return self.fn(value)


class Filter(Sequence):
    """Yields the upstream values for which `pred` is truthy."""
    script_name = "filter"

    def __init__(self, source, pred: Callable[[Any], Any]):
        super().__init__()
        _require_callable("filter", pred)
        self.source = as_sequence(source)
        self.pred = pred

    def _next(self):
        # A long run of rejected values must not grow the stack, so this is a loop.
        puller = _Puller("filter")
        while True:
            value = puller.pull(self.source)
            if value is END or self.pred(value):
                return value


class Enumerate(Sequence):
    """Pairs each upstream value with its position: (0, a), (1, b), ..."""
    script_name = "enumerate"

    def __init__(self, source):
        super().__init__()
        self.source = as_sequence(source)
        self.index = 0

    def _next(self):
        value = self.source.advance()
        if value is END:
            return END
        pair = (self.index, value)
        self.index += 1
        return pair


__all__ = [
    "Sequence",
    "FnSequence",
    "as_sequence",
    "ListIter",
    "RevListIter",
    "Range",
    "RangeInclusive",
    "Map",
    "Filter",
    "Enumerate",
]
