"""
The prelude binding table: every prelude operation under its script name.
"""
import inspect
import re
from typing import Any, Callable, Dict, List

from prelude.prelude_consumers import add_one, collect_list, fold, for_each, reduce, sum_seq
from prelude.prelude_datatypes import clone
from prelude.prelude_numeric import str2num
from prelude.prelude_sequences import (
    Enumerate, Filter, ListIter, Map, Range, RangeInclusive, RevListIter, _dbg,
)


def _script_name(py_name: str) -> str:
    """`list_iter` -> `listIter`."""
    head, *rest = py_name.split('_')
    return head + ''.join(part[:1].upper() + part[1:] for part in rest)


class PreludeLib:
    """Python implementations for all prelude built-ins.

    Methods named `_core_<name>` are host primitives bound as `core/<name>`.
    Every other `_<name>` method is a prelude operation bound under its
    camelCase name, with a stable `prelude/<name>` alias.
    """
    def __init__(self):
        self._bindings: Dict[str, Callable] = {}
        for name, member in inspect.getmembers(self):
            if not name.startswith('_') or name.startswith('__') or not callable(member):
                continue
            if name.startswith('_core_'):
                self._bindings[f"core/{name[len('_core_'):]}"] = member
                continue
            script = _script_name(name[1:])
            self._bindings[script] = member
            self._bindings[f"prelude/{script}"] = member

    # --- Host primitives ---
    def _core_list(self, *items): return list(items)
    def _core_length(self, collection): return len(collection)
    def _core_index(self, collection, i): return collection[i]
    def _core_clone(self, value): return clone(value)
    def _core_and(self, *values):
        result = True
        for v in values:
            result = v
            if not v:
                break
        return result
    def _core_or(self, *values):
        result = False
        for v in values:
            result = v
            if v:
                break
        return result

    # --- Sources ---
    def _list_iter(self, items): return ListIter(items)
    def _rev_list_iter(self, items): return RevListIter(items)
    def _range(self, start, end): return Range(start, end)
    def _range_inclusive(self, start, end): return RangeInclusive(start, end)

    # --- Combinators ---
    def _map(self, seq, fn): return Map(seq, fn)
    def _filter(self, seq, pred): return Filter(seq, pred)
    def _enumerate(self, seq): return Enumerate(seq)
    def _add_one(self, seq): return add_one(seq)

    # --- Consumers ---
    def _for_each(self, seq, fn): return for_each(seq, fn)
    def _reduce(self, seq, fn): return reduce(seq, fn)
    def _fold(self, seq, initial, fn): return fold(seq, initial, fn)
    def _sum(self, seq): return sum_seq(seq)
    def _collect_list(self, seq): return collect_list(seq)

    # --- Parsing ---
    def _str2num(self, text): return str2num(text)

    def bindings(self) -> Dict[str, Callable]:
        return dict(self._bindings)

    def names(self) -> List[str]:
        return sorted(self._bindings)

    def lookup(self, name: str) -> Callable:
        _dbg("lookup()", name)
        try:
            return self._bindings[name]
        except KeyError:
            raise KeyError(f"'{name}'") from None

    def call(self, name: str, *args: Any) -> Any:
        return self.lookup(name)(*args)

    def prelude_names(self) -> List[str]:
        """Script names of the prelude operations, without aliases or host primitives."""
        return sorted(n for n in self._bindings if not re.match(r'^(core|prelude)/', n))
