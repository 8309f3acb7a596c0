"""
feroxargs catalog: the ordered, validated registry of argument specifications.

Lifecycle
- Build: `declare(spec)` appends specs in order (append-only).
- Finalize: `finalize()` appends the built-in help/version switches, checks
  every constraint reference, mirrors ConflictsWith to both sides, and freezes
  the catalog. `Catalog.build(specs, ...)` does both steps at once.
- Use: `lookup(name)`, `all()`, `resolve(form)` and `constraints(name)` are
  only available once finalized.

Defects
- Anything inconsistent in the table itself (duplicate names or spellings,
  references to undeclared arguments, mutually exclusive required arguments,
  use before finalize / declare after finalize) raises SchemaDefect. These are
  programming errors in the tool and surface at startup.
"""
from collections import defaultdict
from types import MappingProxyType

from rich.text import Text

from .arguments import ArgumentSpec, Required, RequiredUnless, ConflictsWith
from .faults import SchemaDefect
from .logs import logger
from .utils import *

# Built-in switches appended on finalize, unless their spellings are taken.
BUILTINS = (
    ("help", "h", "help", "Prints help information"),
    ("version", "V", "version", "Prints version information"),
)


def _process_strings(cls, metadata):
    """
    Normalize scalar metadata fields.

    - name is required; version/author/about are optional.
    - strings are trimmed and must stay non-empty; the epilog is kept verbatim
      (only checked for non-blankness) since it is reproduced character-for-character.
    - Unset resolves to None.
    """
    for name in ("name", "version", "author", "about", "epilog"):
        if not isinstance(object := metadata[name], str | Text | Unset):
            raise TypeError(f"{cls.__name__.lower()} {name!r} must be a string")
        elif isinstance(object, str) and not object.strip():
            raise ValueError(f"{cls.__name__.lower()} {name!r} cannot be empty")
        elif isinstance(object, str) and name != "epilog":
            object = object.strip()
        metadata[name] = coalesce(object)

    if metadata["name"] is None:
        raise TypeError(f"{cls.__name__.lower()} must have a program name")

    if not isinstance(delimiter := metadata["delimiter"], str):
        raise TypeError(f"{cls.__name__.lower()} 'delimiter' must be a string")
    elif len(delimiter) != 1 or delimiter.isspace() or delimiter == "-":
        raise ValueError(f"{cls.__name__.lower()} 'delimiter' must be a single non-blank character other than '-'")


class Catalog:
    """
    Ordered registry of ArgumentSpec plus program metadata.

    Properties
    - name, version, author, about, epilog, delimiter: program metadata.
    - specs: tuple of every declared spec in declaration order.
    - forms: read-only mapping of every spelling ('-u', '--url') to its spec.
    - finalized: whether the catalog is frozen.
    """

    name = mirror("name")
    version = mirror("version")
    author = mirror("author")
    about = mirror("about")
    epilog = mirror("epilog")
    delimiter = mirror("delimiter")
    specs = mirror("specs")
    forms = mirror("forms")
    finalized = mirror("finalized")

    def __init__(self, name, /, version=Unset, author=Unset, about=Unset, epilog=Unset, *, delimiter=","):
        metadata = {
            "name": name,
            "version": version,
            "author": author,
            "about": about,
            "epilog": epilog,
            "delimiter": delimiter,
        }
        _process_strings(type(self), metadata)
        for name, object in metadata.items():
            setattr(self, "_" + name, object)

        self._specs = []
        self._names = {}
        self._forms = {}
        self._constraints = {}
        self._finalized = False

    @classmethod
    def build(cls, specs, /, *args, **kwargs):
        """
        Declare every spec of a static table and finalize in one step.
        """
        self = cls(*args, **kwargs)
        for spec in specs:
            self.declare(spec)
        return self.finalize()

    def declare(self, spec, /):
        """
        Append a spec. Its name and every spelling must be unused.

        Returns the spec, so tables can be assembled fluently.
        """
        if self._finalized:
            raise SchemaDefect(f"catalog {self.name!r} is finalized; cannot declare {spec!r}")
        if not isinstance(spec, ArgumentSpec):
            raise TypeError("declare() argument must be an argument-spec")
        if spec.name in self._names:
            raise SchemaDefect(f"catalog {self.name!r} already declares an argument named {spec.name!r}")
        for form in spec.forms:
            if form in self._forms:
                raise SchemaDefect(
                    f"catalog {self.name!r} spelling {form!r} of {spec.name!r} is already used by {self._forms[form].name!r}"
                )

        self._specs.append(spec)
        self._names[spec.name] = spec
        for form in spec.forms:
            self._forms[form] = spec
        return spec

    def finalize(self):
        """
        Freeze the catalog after appending built-ins and checking the table.

        Checks
        - every RequiredUnless/ConflictsWith names a declared argument;
        - no two Required arguments conflict with each other (never satisfiable).

        Returns self.
        """
        if self._finalized:
            return self

        for name, short, long, help in BUILTINS:
            if name in self._names:
                continue
            short = short if "-" + short not in self._forms else Unset
            long = long if "--" + long not in self._forms else Unset
            if short or long:
                self.declare(ArgumentSpec(name, short, long, help=help))

        conflicts = defaultdict(list)
        for spec in self._specs:
            for constraint in spec.constraints:
                if isinstance(constraint, RequiredUnless | ConflictsWith) and constraint.other not in self._names:
                    raise SchemaDefect(
                        f"catalog {self.name!r} argument {spec.name!r} references undeclared {constraint.other!r}"
                    )
                if isinstance(constraint, ConflictsWith):
                    conflicts[spec.name].append(constraint.other)
                    conflicts[constraint.other].append(spec.name)

        for spec in self._specs:
            declared = list(spec.constraints)
            for other in conflicts[spec.name]:
                if ConflictsWith(other) not in declared:
                    declared.append(ConflictsWith(other))
            self._constraints[spec.name] = tuple(declared)

        required = {spec.name for spec in self._specs if Required() in spec.constraints}
        for name in required:
            if clash := required.intersection(conflicts[name]):
                raise SchemaDefect(
                    f"catalog {self.name!r} required argument {name!r} conflicts with required {sorted(clash)[0]!r}"
                )

        self._forms = MappingProxyType(self._forms)
        self._finalized = True
        logger.debug("catalog %r finalized with %d arguments", self.name, len(self._specs))
        return self

    def _ensure_finalized(self):
        if not self._finalized:
            raise SchemaDefect(f"catalog {self.name!r} must be finalized before use")

    def lookup(self, name, /):
        """
        Return the spec declared under `name`; KeyError when there is none.
        """
        self._ensure_finalized()
        try:
            return self._names[name]
        except KeyError:
            raise KeyError(f"catalog {self.name!r} declares no argument named {name!r}") from None

    def all(self):
        """
        Every spec in declaration order (built-ins last).
        """
        self._ensure_finalized()
        return tuple(self._specs)

    def resolve(self, form, /):
        """
        Return the spec spelled `form` ('-u' or '--url'); KeyError when unknown.
        """
        self._ensure_finalized()
        return self._forms[form]

    def constraints(self, name, /):
        """
        Constraints of `name` in evaluation order: its own declarations first,
        then the mirrored side of ConflictsWith declared by other arguments.
        """
        self._ensure_finalized()
        try:
            return self._constraints[name]
        except KeyError:
            raise KeyError(f"catalog {self.name!r} declares no argument named {name!r}") from None

    def __contains__(self, name, /):
        return name in self._names

    def __iter__(self):
        return iter(self.all())

    def __len__(self):
        return len(self._specs)

    def __repr__(self):
        return f"catalog(name={self.name!r}, version={self.version!r}, specs={len(self._specs)}, finalized={self._finalized!r})"

    def __rich_repr__(self):
        yield "name", self.name
        yield "version", self.version
        yield "specs", self.specs
        yield "finalized", self.finalized


__all__ = (
    "Catalog",
    "BUILTINS",
)
