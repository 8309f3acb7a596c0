"""
feroxargs faults (user-facing errors and build-time defects) and rendering.

Scope
- FaultCode: canonical, stable numeric identifiers for every user-facing error.
  Codes are grouped by domain (token collection vs. cross-argument constraints).
- ArgumentError: base type carrying message + read-only options; knows how to
  render itself (rich) and how to surface itself (__trigger__).
- SchemaDefect: build-time only; a catalog that trips it is a programming error
  in the tool, never a user mistake, and it is never rendered as usage.
- trigger(): central entry point to surface a fault (respecting shell/colorful/fancy).

Integration
- parse() raises faults directly (non-shell mode).
- run() hands them to trigger(..., shell=True): the usage synopsis and the error
  are written to stderr and the process exits with status 1. With fancy=True the
  error is drawn by __rich__ (coded header inside a Panel) above the usage block.
"""
import copy
import sys
from collections import defaultdict
from enum import IntEnum
from types import MappingProxyType

from rich.console import Console, Group
from rich.panel import Panel
from rich.text import Text

from .render import render_usage
from .utils import Unset

console = Console(stderr=True)


class FaultCode(IntEnum):
    """
    canonical fault codes used across the parser (stable identifiers).

    grouping
    - tokens (211xx)
      • UNKNOWN_ARGUMENT, UNEXPECTED_VALUE, MISSING_VALUE
    - constraints (221xx)
      • MISSING_REQUIRED_ARGUMENT, CONFLICTING_ARGUMENTS
    """
    # --- token errors (211xx) ---
    UNKNOWN_ARGUMENT            = 21101
    UNEXPECTED_VALUE            = 21102
    MISSING_VALUE               = 21103

    # --- constraint errors (221xx) ---
    MISSING_REQUIRED_ARGUMENT   = 22101
    CONFLICTING_ARGUMENTS       = 22102

    def normalize(self):
        """
        return a host-normalized string for this code.

        the host application can provide a __codes__ mapping in __main__
        to override numeric ids with friendlier labels.
        """
        return str(getattr(__import__("__main__"), "__codes__", {}).get(self, self.value))


class SchemaDefect(AssertionError):
    """
    A catalog was assembled inconsistently (duplicate forms, dangling references).
    """


class ArgumentError(Exception):
    """
    Base of every user-facing parse fault.

    The message is a single lowercased sentence naming the offending argument(s);
    everything else (code, title, hint, argument, other, token, suggestions, and
    the runtime options shell/colorful/fancy/catalog) travels in `options`.
    """

    def __init__(self, message=Unset, /, **options):
        assert isinstance(message, str | Unset)
        super().__init__(message)
        self.message = message
        self.options = MappingProxyType(options)

    def __str__(self):
        return str(self.message or "")

    @property
    def code(self):
        return self.options.get("code")

    @property
    def arguments(self):
        """
        Names of the offending arguments, primary first.
        """
        return tuple(
            self.options[name] for name in ("argument", "other") if self.options.get(name) is not None
        )

    def __rich__(self):
        main = __import__("__main__")
        colorful = self.options.get("colorful", True)

        styles = defaultdict(str, {
            # header parts
            "prog-name": "bold #E6E6F0",  # near-white program name
            "code": "bold #00E5FF",  # neon cyan fault code
            "error-title": "bold #FF4DA6",  # friendly pinky title

            # body
            "error-message": "#C8C8D0",  # soft light gray message
            "hint-arrow": "#9CE19C dim",  # gentle green arrow
            "hint": "italic #9CE19C",  # gentle green hint text
        } | getattr(main, "__styles__", {}))

        def styler(style):
            return styles[style] if colorful else ""

        def text(fragment, style=""):
            if not fragment:
                return Text("")
            if not colorful:
                return Text(str(fragment))
            return Text(str(fragment), style)

        try:
            prog = self.options["catalog"].name
        except KeyError:
            prog = getattr(main, "__prog__", "feroxargs")

        header = Text.assemble(
            "[ ",
            text(prog, styler("prog-name")),
            " — ",
            text(self.code.normalize() if self.code else "", styler("code")),
            " | ",
            text(self.options.get("title", "error").title(), styler("error-title")),
            " ]"
        )
        message = text(self.message, styler("error-message"))

        renders = [message]
        if self.options.get("hint"):
            renders.append(Text.assemble(text(" → ", styler("hint-arrow")), text(self.options["hint"], styler("hint"))))

        if self.options.get("fancy", False):
            return Panel(Group(*renders), title=header, title_align="left")

        return Group(header, *renders)

    def __trigger__(self):
        if not self.options.get("shell", False):
            raise self from None

        catalog = self.options["catalog"]
        colorful = self.options.get("colorful", True)
        if self.options.get("fancy", False):
            # Panel with the coded header, then the bare usage block.
            renderable = Group(self, Text(""), render_usage(catalog, colorful=colorful))
        else:
            renderable = render_usage(catalog, self, colorful=colorful)
        console.print(renderable, soft_wrap=True)
        sys.exit(1)

    def __replace__(self, *unused, **overrides):
        assert not unused, "unused arguments are not allowed"
        return type(self)(self.message, **{**self.options, **overrides})


class UnknownArgumentError(ArgumentError): ...
class UnexpectedValueError(ArgumentError): ...
class MissingValueForArgumentError(ArgumentError): ...
class MissingRequiredArgumentError(ArgumentError): ...
class ConflictingArgumentsError(ArgumentError): ...


def trigger(fault, /, **options):
    """
    surface a fault with the given runtime options.

    contract
    - fault must provide __trigger__ and __replace__ methods (see ArgumentError).
    - options are merged into the fault via copy.replace before triggering.
    - in shell mode the usage block is written to stderr and the process exits;
      otherwise the fault is raised.
    """
    if (
        not hasattr(fault, "__trigger__") or
        not callable(fault.__trigger__) or
        not hasattr(fault, "__replace__") or
        not callable(fault.__replace__)
    ):
        raise TypeError("trigger() argument must have a __trigger__ and __replace__ methods")
    copy.replace(fault, **options).__trigger__()


__all__ = (
    "FaultCode",
    "SchemaDefect",
    "ArgumentError",
    "UnknownArgumentError",
    "UnexpectedValueError",
    "MissingValueForArgumentError",
    "MissingRequiredArgumentError",
    "ConflictingArgumentsError",
    "trigger",
)
