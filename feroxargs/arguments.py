r"""
feroxargs argument specifications.

Overview
- Arity: how many value tokens a flag consumes (NONE / ONE / MANY).
- ArgumentSpec: one declared flag. Immutable once built; exposes its metadata
  through read-only properties declared in __introspectable__.

Metadata (sanitized on construction)
- name: str, identifier-like canonical key (e.g., "sizefilters").
- short: Unset | str, one letter (e.g., "S"); rendered as "-S".
- long: Unset | str, a word (e.g., "sizefilter"); rendered as "--sizefilter".
  At least one of short/long is required.
- arity: Arity (defaults to NONE).
- counted: bool, NONE arity only; occurrences are tallied (e.g., -vv → 2).
- delimited: bool, MANY arity only; each token is also split on the catalog delimiter.
- help: Unset | str, one-line description (trimmed, non-empty when provided).
- default: Unset | str, documentation of the downstream default; never enforced.
- metavar: Unset | str, value placeholder; defaults to the upper-cased name for
  value-bearing specs and is forbidden on NONE arity.
- constraints: Iterable of Required / RequiredUnless / ConflictsWith.

Validation highlights
- short must match r"[^\W\d_]", long must match r"[^\W\d_](-?[^\W_]+)*".
- counted/delimited are rejected on the wrong arity.
- Duplicate constraints are rejected; references are checked by the catalog.

Quick example:
    >>> threads = ArgumentSpec("threads", "t", "threads", arity=Arity.ONE, default="50")
    >>> threads.signature
    '--threads <THREADS>'
"""
import functools
import operator
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum

from rich.text import Text

from .utils import *


class Arity(Enum):
    """
    Number of value tokens a flag consumes.
    """
    NONE = "none"
    ONE = "one"
    MANY = "many"


@dataclass(frozen=True, slots=True)
class Required:
    """
    The argument must be present.
    """


@dataclass(frozen=True, slots=True)
class RequiredUnless:
    """
    The argument must be present unless `other` is.
    """
    other: str


@dataclass(frozen=True, slots=True)
class ConflictsWith:
    other: str


class SpecType(type):
    """
    Metaclass that gives specs a stable representation and read-only fields.

    Responsibilities
    - Expose every name listed in __introspectable__ as a read-only property
      mirroring the private "_<name>" backing field (see mirror()).
    - Provide stable, readable __repr__/__rich_repr__ implementations for
      diagnostics and pretty printers.

    Conventions
    - __typename__ is derived from the class name (camel-case split with hyphens)
      and used in messages.
    """
    __introspectable__ = ()

    def __new__(cls, name, bases, namespace, **options):
        self = super().__new__(
            cls,
            name,
            bases,
            namespace | {
                "__typename__": re.sub(r"(?<!^)(?=[A-Z])", r"-", name).lower(),
            } | {
                name: mirror(name) for name in namespace.get("__introspectable__", ())
            },
        )

        @rename("__repr__")
        def __repr__(self):
            """
            Return a concise, stable representation with key metadata.

            Example
            - argument-spec(name='quiet', short='q', long='quiet', ...)
            """
            return f"{type(self).__typename__}({', '.join(map(functools.partial(operator.mod, '%s=%r'), self.__rich_repr__()))})"
        self.__repr__ = __repr__

        @rename("__rich_repr__")
        def __rich_repr__(self):
            """
            Yield (name, object) pairs for pretty printers.
            """
            for name in type(self).__introspectable__:
                yield name, getattr(self, name)
        self.__rich_repr__ = __rich_repr__

        return self


def _sanitize_forms(cls, metadata, /):
    """
    Internal: validate the canonical name and the short/long spellings.

    Raises
    - TypeError: when a field is not a string (or Unset where allowed), or when
      neither short nor long is given.
    - ValueError: when a field is empty or not a valid spelling.
    """
    if not isinstance(name := metadata["name"], str):
        raise TypeError(f"{cls.__typename__} 'name' must be a string")
    elif not re.fullmatch(r"[^\W\d]\w*", name := name.strip()):
        raise ValueError(f"{cls.__typename__} 'name' must be a valid identifier")
    metadata["name"] = name

    if not isinstance(short := metadata["short"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'short' must be a string")
    elif isinstance(short, str) and not re.fullmatch(r"[^\W\d_]", short):
        raise ValueError(f"{cls.__typename__} 'short' must be a single letter")

    if not isinstance(long := metadata["long"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'long' must be a string")
    elif isinstance(long, str) and not re.fullmatch(r"[^\W\d_](-?[^\W_]+)*", long):
        raise ValueError(f"{cls.__typename__} 'long' must be a valid shell-style word (without dashes in front)")

    if not short and not long:
        raise TypeError(f"{cls.__typename__} {name!r} must specify a short or a long form")


def _sanitize_shape(cls, metadata, /):
    """
    Internal: validate arity and the flags that only make sense for some arities.

    - counted requires Arity.NONE.
    - delimited requires Arity.MANY.
    - metavar is forbidden on Arity.NONE and defaults to NAME otherwise.
    """
    if not isinstance(arity := metadata["arity"], Arity):
        raise TypeError(f"{cls.__typename__} 'arity' must be an Arity")

    if metadata["counted"] and arity is not Arity.NONE:
        raise TypeError(f"{cls.__typename__} {metadata['name']!r} only value-less arguments can be counted")
    if metadata["delimited"] and arity is not Arity.MANY:
        raise TypeError(f"{cls.__typename__} {metadata['name']!r} only multi-valued arguments can be delimited")

    if not isinstance(metavar := metadata["metavar"], str | Unset):
        raise TypeError(f"{cls.__typename__} 'metavar' must be a string")
    elif isinstance(metavar, str) and not (metavar := metavar.strip()):
        raise ValueError(f"{cls.__typename__} 'metavar' cannot be empty")

    if arity is Arity.NONE:
        if metavar:
            raise TypeError(f"{cls.__typename__} {metadata['name']!r} value-less arguments cannot have a 'metavar'")
        metadata["metavar"] = None
    else:
        metadata["metavar"] = coalesce(metavar, metadata["name"].upper())


def _sanitize_documentation(cls, metadata, /):
    """
    Internal: normalize help and default documentation strings.

    Both are optional; when provided they are trimmed and must stay non-empty.
    Unset becomes None.
    """
    for field in ("help", "default"):
        if not isinstance(object := metadata[field], str | Text | Unset):
            raise TypeError(f"{cls.__typename__} {field!r} must be a string")
        elif isinstance(object, str) and not (object := object.strip()):
            raise ValueError(f"{cls.__typename__} {field!r} cannot be empty")
        metadata[field] = coalesce(object)


def _sanitize_constraints(cls, metadata, /):
    """
    Internal: validate the attached constraint records.

    - must be an iterable (not a string) of Required / RequiredUnless / ConflictsWith.
    - duplicates are rejected; a spec cannot reference itself.
    - stabilized into a tuple, keeping declaration order.
    """
    if not isinstance(constraints := metadata["constraints"], Iterable) or isinstance(constraints, str):
        raise TypeError(f"{cls.__typename__} 'constraints' must be an iterable of constraints")

    sanitized = []
    for constraint in constraints:
        if not isinstance(constraint, Required | RequiredUnless | ConflictsWith):
            raise TypeError(f"{cls.__typename__} 'constraints' must be an iterable of constraints")
        if isinstance(constraint, RequiredUnless | ConflictsWith) and constraint.other == metadata["name"]:
            raise ValueError(f"{cls.__typename__} {metadata['name']!r} cannot reference itself in {constraint!r}")
        if constraint in sanitized:
            raise ValueError(f"{cls.__typename__} 'constraints' cannot contain duplicates")
        sanitized.append(constraint)
    metadata["constraints"] = tuple(sanitized)


class ArgumentSpec(metaclass=SpecType):
    """
    Declaration of a single command-line flag.

    An ArgumentSpec describes *shape* only: how the flag is spelled, how many
    values it takes, how repeated occurrences combine, and which cross-argument
    rules apply to it. Interpreting values (integers, URLs, proxies) is left to
    the consumer of the resolved configuration.
    """

    __introspectable__ = (
        "name",
        "short",
        "long",
        "arity",
        "counted",
        "delimited",
        "help",
        "default",
        "metavar",
        "constraints",
    )

    def __new__(
            cls,
            name,
            /,
            short=Unset,
            long=Unset,
            *,
            arity=Arity.NONE,
            counted=False,
            delimited=False,
            help=Unset,
            default=Unset,
            metavar=Unset,
            constraints=(),
    ):
        """
        Construct an ArgumentSpec with the provided metadata.

        Parameters
        - name: str
          Canonical key; the resolved configuration is indexed by it.
        - short: Unset | str
          Single letter; "-x" on the command line.
        - long: Unset | str
          Word; "--word" on the command line.
        - arity: Arity
          NONE (switch), ONE (single value, last write wins) or MANY (accumulates).
        - counted: bool
          Tally occurrences of a switch instead of recording presence.
        - delimited: bool
          Additionally split every MANY token on the catalog delimiter.
        - help / default / metavar: documentation used by the renderer.
        - constraints: Iterable of Required / RequiredUnless / ConflictsWith.
        """
        metadata = {
            "name": name,
            "short": short,
            "long": long,
            "arity": arity,
            "counted": bool(counted),
            "delimited": bool(delimited),
            "help": help,
            "default": default,
            "metavar": metavar,
            "constraints": constraints,
        }
        _sanitize_forms(cls, metadata)
        _sanitize_shape(cls, metadata)
        _sanitize_documentation(cls, metadata)
        _sanitize_constraints(cls, metadata)

        self = super().__new__(cls)
        # Mirror sanitized metadata into private fields; read-only properties expose them.
        for name, object in metadata.items():
            setattr(self, "_" + name, coalesce(object))
        return self

    @property
    def forms(self):
        """
        Command-line spellings, short first (e.g., ('-u', '--url')).
        """
        return tuple(form for form in (
            "-" + self.short if self.short else None,
            "--" + self.long if self.long else None,
        ) if form)

    @property
    def switch(self):
        return self.arity is Arity.NONE

    @property
    def many(self):
        return self.arity is Arity.MANY

    @property
    def placeholder(self):
        """
        Value placeholder as shown in help: '<URL>...' for MANY, '<FILE>' for ONE, '' otherwise.
        """
        if self.switch:
            return ""
        return "<%s>%s" % (self.metavar, "..." * self.many)

    @property
    def signature(self):
        """
        Preferred spelling plus placeholder, used in messages (e.g., '--url <URL>...').
        """
        return " ".join(part for part in (self.forms[-1], self.placeholder) if part)


__all__ = (
    # Specification
    "Arity",
    "ArgumentSpec",

    # Constraint variants
    "Required",
    "RequiredUnless",
    "ConflictsWith",
)

del SpecType
