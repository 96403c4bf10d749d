"""
A pretty-printer for prelude values, in the script's surface syntax.
"""
import collections.abc

from prelude.prelude_datatypes import END, Accumulator, Name, Response
from prelude.prelude_sequences import Sequence


class Printer:
    """Formats prelude values into readable script-syntax strings."""

    def __init__(self):
        self._handlers = self._create_handlers()

    def pformat(self, obj):
        """Public entry point to format an object."""
        handler = self._get_handler(obj)
        return handler(obj)

    def _get_handler(self, obj):
        # Fast path for the singleton
        if obj is END: return self._pformat_end

        obj_type = type(obj)
        if obj_type in self._handlers:
            return self._handlers[obj_type]
        if isinstance(obj, Sequence): return self._pformat_sequence
        if isinstance(obj, bool): return self._pformat_bool
        if isinstance(obj, str): return self._pformat_str
        if isinstance(obj, tuple): return self._pformat_tuple
        if isinstance(obj, collections.abc.Mapping): return self._pformat_dict
        if isinstance(obj, list): return self._pformat_list
        # Default to Python's repr for unknown types
        return repr

    def _create_handlers(self):
        return {
            str: self._pformat_str,
            int: self._pformat_primitive,
            float: self._pformat_primitive,
            bool: self._pformat_bool,
            type(None): self._pformat_none,
            list: self._pformat_list,
            tuple: self._pformat_tuple,
            dict: self._pformat_dict,
            Response: self._pformat_response,
            Accumulator: self._pformat_accumulator,
            Name: self._pformat_name,
        }

    def _pformat_end(self, obj):
        return 'end'

    def _pformat_primitive(self, obj):
        return str(obj)

    def _pformat_str(self, obj):
        escaped = obj.replace('\\', '\\\\').replace('"', '\\"')
        return f'"{escaped}"'

    def _pformat_bool(self, obj):
        return 'true' if obj else 'false'

    def _pformat_none(self, obj):
        return 'none'

    def _pformat_list(self, obj):
        return '[' + ' '.join(self.pformat(v) for v in obj) + ']'

    def _pformat_tuple(self, obj):
        return '(' + ' '.join(self.pformat(v) for v in obj) + ')'

    def _pformat_dict(self, obj):
        if not obj:
            return "{}"
        fields = ', '.join(f"{self.pformat(k)}: {self.pformat(v)}" for k, v in obj.items())
        return "{" + fields + "}"

    def _pformat_record(self, fields):
        # Field names are bare identifiers, not string keys.
        return "{" + ", ".join(f"{k}: {self.pformat(v)}" for k, v in fields) + "}"

    def _pformat_name(self, obj):
        return obj.text

    def _pformat_response(self, obj):
        return f"{self.pformat(obj.status)} {self.pformat(obj.value)}"

    def _pformat_accumulator(self, obj):
        return self._pformat_record([("out", obj.out), ("mul", obj.mul), ("valid", obj.valid)])

    def _pformat_sequence(self, obj):
        return f"<{obj.script_name}>"
