"""
Value collector: one left-to-right walk over the raw token stream.

Recognized shapes
- long flags:    '--url', '--url=http://a,http://b'
- short flags:   '-u', '-uhttp://a', '-t=10', clusters such as '-vv', '-kr', '-vvt 10'
- '--' alone:    stops flag recognition; every later token is a plain value
- '-' alone:     a plain value
- anything else: a plain value, routed to the open multi-value collection

Accumulation
- Arity.MANY: following tokens are consumed greedily until the next flag or
  the end of the stream; each is split on the catalog delimiter when the spec
  is delimited. Values accumulate in encounter order across repeated flags,
  space-separated runs and delimiter-split sub-tokens.
- Arity.ONE: exactly one value; a later occurrence overwrites (last write wins).
- Arity.NONE, counted: every occurrence increments the tally.
- Arity.NONE: presence is recorded as True.

Faults
- UnknownArgumentError: a flag-looking token matches no declared spelling.
- UnexpectedValueError: a plain token has nowhere to go, or a switch got an inline value.
- MissingValueForArgumentError: a value-bearing flag is followed by nothing or by another flag.
"""
import difflib
from collections import deque

from .arguments import Arity
from .faults import FaultCode, UnknownArgumentError, UnexpectedValueError, MissingValueForArgumentError
from .logs import logger
from .utils import Unset

TERMINATOR = "--"


def flagged(token, /):
    """
    Whether a raw token looks like a flag marker ('-x', '--word', '--').
    """
    return len(token) > 1 and token.startswith("-")


class Collector:
    """
    Collect the values of a finalized catalog from a token stream.

    A collector is single-use: `collect()` consumes the stream and returns a
    dict mapping the name of every present argument to its CollectedValue
    (str, list[str], int or True). Absent arguments have no key.
    """

    def __init__(self, catalog, tokens, /):
        if not catalog.finalized:
            raise TypeError("collector catalog must be finalized")
        if isinstance(tokens, str):
            raise TypeError("collector tokens must be an iterable of strings, not a string")
        self._catalog = catalog
        self._tokens = deque(tokens)
        self._values = {}
        self._pending = None  # MANY spec currently receiving plain tokens
        self._terminated = False
        self._index = 0

        for token in self._tokens:
            if not isinstance(token, str):
                raise TypeError("collector tokens must be strings")

    def collect(self):
        while self._tokens:
            token = self._next()

            if self._terminated or not flagged(token):
                self._plain(token)
            elif token == TERMINATOR:
                logger.debug("flag recognition stopped at token %d", self._index)
                self._pending = None
                self._terminated = True
            elif token.startswith("--"):
                self._long(token)
            else:
                self._short(token)

        return self._values

    def _next(self):
        self._index += 1
        return self._tokens.popleft()

    def _unknown(self, form, token):
        suggestions = difflib.get_close_matches(form, self._catalog.forms.keys(), 5)
        try:
            hint = "did you mean %r? try --help to see every accepted argument" % suggestions[0]
        except IndexError:
            hint = "try --help to see every accepted argument"
        return UnknownArgumentError(
            "found argument %r which wasn't expected, or isn't valid in this context" % form,
            title="unknown argument",
            code=FaultCode.UNKNOWN_ARGUMENT,
            argument=form,
            token=token,
            index=self._index,
            suggestions=suggestions,
            hint=hint,
        )

    def _plain(self, token):
        if self._pending is None or self._terminated:
            raise UnexpectedValueError(
                "found value %r with no argument to receive it" % token,
                title="unexpected value",
                code=FaultCode.UNEXPECTED_VALUE,
                token=token,
                index=self._index,
                hint="values must follow the flag they belong to (e.g. -x php %s)" % token,
            )
        self._append(self._pending, token)

    def _long(self, token):
        form, separator, value = token.partition("=")
        try:
            spec = self._catalog.resolve(form)
        except KeyError:
            raise self._unknown(form, token) from None
        self._occur(spec, form, value if separator else Unset)

    def _short(self, token):
        cluster = token[1:]
        for index, letter in enumerate(cluster):
            form = "-" + letter
            try:
                spec = self._catalog.resolve(form)
            except KeyError:
                raise self._unknown(form, token) from None

            if spec.switch:
                self._occur(spec, form)
                continue

            # The first value-bearing letter takes the rest of the cluster as its value.
            rest = cluster[index + 1:]
            if rest:
                self._occur(spec, form, rest[1:] if rest.startswith("=") else rest)
            else:
                self._occur(spec, form)
            break

    def _occur(self, spec, form, inline=Unset):
        """
        Record one occurrence of `spec`, spelled `form`, with an optional inline value.
        """
        self._pending = None
        logger.debug("token %d recognized as %r (%s)", self._index, spec.name, form)

        if spec.switch:
            if inline is not Unset:
                raise UnexpectedValueError(
                    "found value %r attached to %r, which takes no value" % (inline, form),
                    title="unexpected value",
                    code=FaultCode.UNEXPECTED_VALUE,
                    argument=spec.name,
                    token=inline,
                    index=self._index,
                    hint="remove the value (for example: %s)" % form,
                )
            if spec.counted:
                self._values[spec.name] = self._values.get(spec.name, 0) + 1
            else:
                self._values[spec.name] = True
            return

        if inline is Unset:
            if not self._tokens or flagged(self._tokens[0]):
                raise self._missing(spec, form)
        elif not inline:
            raise self._missing(spec, form)

        if spec.arity is Arity.ONE:
            value = self._next() if inline is Unset else inline
            if spec.name in self._values:
                logger.debug("%r given again; %r replaces %r", spec.name, value, self._values[spec.name])
            self._values[spec.name] = value
            return

        self._values.setdefault(spec.name, [])
        if inline is Unset:
            self._pending = spec
        else:
            self._append(spec, inline)

    def _append(self, spec, token):
        values = token.split(self._catalog.delimiter) if spec.delimited else [token]
        logger.debug("%r collects %r", spec.name, values)
        self._values[spec.name].extend(values)

    def _missing(self, spec, form):
        return MissingValueForArgumentError(
            "the argument %r requires a value but none was supplied" % spec.signature,
            title="missing value",
            code=FaultCode.MISSING_VALUE,
            argument=spec.name,
            token=form,
            index=self._index,
            hint="add a value after %s (for example: %s %s)" % (form, form, spec.placeholder),
        )


def collect(catalog, tokens, /):
    """
    Shortcut for Collector(catalog, tokens).collect().
    """
    return Collector(catalog, tokens).collect()


__all__ = (
    "TERMINATOR",
    "flagged",
    "Collector",
    "collect",
)
