"""
Defines the core value types shared by the prelude.

This module provides the end-of-sequence marker, the structured outcome
type used by parsing helpers, and the mutable accumulator record threaded
through `str2num`.
"""

import copy
from dataclasses import dataclass
from typing import Any


class _End:
    """The single end-of-sequence marker. Use `is END` to test for it."""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "END"

    def __bool__(self) -> bool:
        return False

    # A copied marker must still be the marker.
    def __copy__(self):
        return self

    def __deepcopy__(self, memo):
        return self

    def __reduce__(self):
        return (_End, ())


END = _End()


def clone(value: Any) -> Any:
    """Independent copy of `value`, so an emitted value never aliases a generator's own state."""
    if isinstance(value, list):
        return [clone(v) for v in value]
    if isinstance(value, dict):
        return {k: clone(v) for k, v in value.items()}
    # Ints, strings and the marker are immutable: deepcopy hands them back as-is.
    return copy.deepcopy(value)


# =================================================================
# Outcomes
# =================================================================

class Name:
    """A status token such as `ok` or `err`."""
    def __init__(self, text: str):
        self.text = text

    def __repr__(self) -> str:
        return f"Name<{self.text!r}>"

    def __eq__(self, other):
        return isinstance(other, Name) and self.text == other.text

    def __hash__(self):
        return hash(self.text)


OK = Name("ok")
ERR = Name("err")


class Response:
    """Represents a structured outcome: a value under an `ok` or `err` status."""
    def __init__(self, status: Name, value: Any):
        self.status = status
        self.value = value

    @property
    def is_ok(self) -> bool:
        return self.status == OK

    def __repr__(self) -> str:
        from prelude.prelude_printer import Printer
        return Printer().pformat(self)

    def __eq__(self, other):
        if not isinstance(other, Response):
            return NotImplemented
        return self.status == other.status and self.value == other.value


@dataclass(repr=False)
class Accumulator:
    """Running state of a single numeric parse.

    `mul` grows by a factor of ten per digit consumed; `valid` only ever
    moves from True to False.
    """
    out: int = 0
    mul: int = 1
    valid: bool = True

    def __repr__(self) -> str:
        from prelude.prelude_printer import Printer
        return Printer().pformat(self)


__all__ = [
    "END",
    "clone",
    "Name",
    "OK",
    "ERR",
    "Response",
    "Accumulator",
]
