"""
feroxargs parser: collect, validate, resolve.

- parse(catalog, tokens): pure; returns a ResolvedConfiguration or raises an
  ArgumentError. When the help or version switch is given, constraints are
  skipped so that `tool --help` works without the otherwise required arguments.
- run(catalog, tokens): shell behavior on top of parse(); prints help/version
  to stdout and exits 0, prints usage + error to stderr and exits 1 on faults,
  returns the configuration otherwise.

Quick start
    from feroxargs.feroxbuster import CATALOG
    from feroxargs.parser import parse

    configuration = parse(CATALOG, ["-u", "http://127.1", "-x", "pdf,js"])
    configuration["extensions"]  # ('pdf', 'js')
"""
import sys

from rich.console import Console

from .collector import Collector
from .configuration import ResolvedConfiguration
from .constraints import validate
from .faults import ArgumentError, trigger
from .logs import logger
from .render import framed, render_help, render_version
from .utils import Unset, coalesce

# Switches that short-circuit validation; both are appended by Catalog.finalize().
TERMINATORS = ("help", "version")


def requested(catalog, values, name, /):
    """
    Whether the switch `name` was given. A value-taking spec under the same
    name (a table's own `--help TOPIC`) never counts.
    """
    return name in catalog and name in values and catalog.lookup(name).switch


def parse(catalog, tokens, /):
    """
    Parse `tokens` against a finalized catalog.

    Returns
    - ResolvedConfiguration with every present argument.

    Raises
    - UnknownArgumentError, UnexpectedValueError, MissingValueForArgumentError
      while collecting; MissingRequiredArgumentError, ConflictingArgumentsError
      while validating. Nothing partial is returned on failure.
    """
    values = Collector(catalog, tokens).collect()

    if any(requested(catalog, values, name) for name in TERMINATORS):
        logger.debug("help or version requested; constraints skipped")
    else:
        validate(catalog, values)

    return ResolvedConfiguration(catalog, values)


def run(catalog, tokens=Unset, /, *, colorful=Unset, fancy=False):
    """
    Parse like a command-line tool would.

    parameters
    - tokens: defaults to sys.argv[1:].
    - colorful: defaults to whether stdout is a terminal.
    - fancy: draw help, version and faults inside titled panels.
    """
    tokens = coalesce(tokens, sys.argv[1:])
    console = Console()
    colorful = coalesce(colorful, console.is_terminal)

    try:
        configuration = parse(catalog, tokens)
    except ArgumentError as fault:
        logger.debug("parse failed with %s", type(fault).__name__)
        return trigger(fault, catalog=catalog, shell=True, colorful=colorful, fancy=fancy)

    for name, renderer in zip(TERMINATORS, (render_help, render_version)):
        if requested(catalog, configuration, name):
            renderable = renderer(catalog, colorful=colorful)
            if fancy:
                renderable = framed(catalog, renderable, label=name, colorful=colorful)
            console.print(renderable, soft_wrap=True)
            sys.exit(0)

    return configuration


__all__ = (
    "TERMINATORS",
    "requested",
    "parse",
    "run",
)
