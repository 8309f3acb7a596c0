"""
Resolved configuration: the immutable result of a successful parse.

A ResolvedConfiguration is a read-only Mapping from argument name to its
collected value, holding present arguments only:
- Arity.ONE          → str
- Arity.MANY         → tuple[str, ...] (encounter order)
- Arity.NONE counted → int (occurrences)
- Arity.NONE         → True

It stays bound to the catalog it was parsed against, so the accessors can tell
"declared but absent" from "never declared" (the latter raises KeyError).
Values are raw strings; interpreting them (integers, URLs, proxies) is up to
whoever receives the configuration.
"""
from collections.abc import Mapping
from types import MappingProxyType

from .arguments import Arity


class ResolvedConfiguration(Mapping):
    """
    Read-only mapping of present arguments to their collected values.

    Accessors
    - is_present(name)      → bool
    - value_of(name)        → str | None (first value for MANY)
    - values_of(name)       → tuple[str, ...] (empty when absent)
    - occurrences_of(name)  → int (switches only)
    """
    __slots__ = ("_catalog", "_values")

    def __init__(self, catalog, values, /):
        frozen = {}
        for spec in catalog.all():
            if spec.name not in values:
                continue
            value = values[spec.name]
            frozen[spec.name] = tuple(value) if spec.arity is Arity.MANY else value
        if unknown := set(values).difference(frozen):
            raise KeyError(f"configuration values for undeclared arguments: {sorted(unknown)!r}")
        object.__setattr__(self, "_catalog", catalog)
        object.__setattr__(self, "_values", MappingProxyType(frozen))

    def __setattr__(self, name, value, /):
        raise AttributeError(f"{type(self).__name__!r} object is read-only")

    def __delattr__(self, name, /):
        raise AttributeError(f"{type(self).__name__!r} object is read-only")

    def __getitem__(self, name, /):
        return self._values[name]

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __repr__(self):
        return f"resolved-configuration({dict(self._values)!r})"

    def __rich_repr__(self):
        yield from self._values.items()

    def __copy__(self):
        return self

    def __deepcopy__(self, memo, /):
        return self

    @property
    def catalog(self):
        return self._catalog

    def _spec(self, name):
        return self._catalog.lookup(name)

    def is_present(self, name, /):
        """
        Whether `name` (a declared argument) was given on the command line.
        """
        self._spec(name)
        return name in self._values

    def value_of(self, name, /):
        """
        Single value of `name`: the value of a ONE argument, the first value of a
        MANY argument, None when absent. Switches have no value (TypeError).
        """
        spec = self._spec(name)
        if spec.switch:
            raise TypeError(f"argument {name!r} takes no value; use is_present() or occurrences_of()")
        if name not in self._values:
            return None
        value = self._values[name]
        return value[0] if spec.many else value

    def values_of(self, name, /):
        """
        Every value of `name` in encounter order; () when absent.
        """
        spec = self._spec(name)
        if spec.switch:
            raise TypeError(f"argument {name!r} takes no value; use is_present() or occurrences_of()")
        if name not in self._values:
            return ()
        value = self._values[name]
        return value if spec.many else (value,)

    def occurrences_of(self, name, /):
        """
        Occurrence count of a switch: the tally for counted switches, 0 or 1 otherwise.
        """
        spec = self._spec(name)
        if not spec.switch:
            raise TypeError(f"argument {name!r} takes values; use value_of() or values_of()")
        value = self._values.get(name, 0)
        return value if spec.counted else int(bool(value))


__all__ = (
    "ResolvedConfiguration",
)
