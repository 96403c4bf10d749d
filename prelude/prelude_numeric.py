"""
`str2num`: integer parsing built from `revListIter` and `fold`.
"""
from prelude.prelude_consumers import fold
from prelude.prelude_datatypes import ERR, OK, Accumulator, Response
from prelude.prelude_sequences import RevListIter, _dbg

DIGITS = "0123456789"


def _step(acc: Accumulator, ch: str) -> Accumulator:
    # Characters arrive least significant first.
    if ch == "_":
        return acc
    if ch not in DIGITS:
        acc.valid = False
        return acc
    acc.out += DIGITS.index(ch) * acc.mul
    acc.mul *= 10
    return acc


def str2num(text: str) -> Response:
    """Parse a decimal integer literal, allowing `_` separators.

    Returns `Response(OK, value)`, or `Response(ERR, message)` when the text
    holds anything other than ASCII digits and underscores. The empty
    string parses as 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"str2num expects a string, not {type(text).__name__}")
    acc = fold(RevListIter(list(text)), Accumulator(), _step)
    if acc.valid:
        return Response(OK, acc.out)
    _dbg("str2num()", "rejected", repr(text))
    return Response(ERR, f"invalid numeric literal: {text!r}")
