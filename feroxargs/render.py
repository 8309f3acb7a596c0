"""
Help, version and usage renderers.

Every renderer is a pure function of a finalized catalog (and, for usage, an
optional fault) returning a rich Text. `.plain` gives the exact characters the
user sees; styles only add color.

Layout (full help)
    <name> <version>
    <author>
    <about>

    USAGE:
        <synopsis>

    OPTIONS:
        -s, --long <METAVAR>...    help (default: X)
        ...

    <epilogue, verbatim>

Palette keys
- program-name, program-version, author, about
- section-label, synopsis
- form, metavar, help, default
- error-label, error-message, hint
- panel-title

Customization
- Define a mapping named __styles__ in __main__ to override any palette entry.
- colorful=False strips every style, including the spans of Text metadata.
- framed(catalog, renderable) wraps output in a titled Panel (fancy mode).
"""
from collections import defaultdict

from rich.panel import Panel
from rich.text import Text

from .arguments import Required, RequiredUnless

# Gap between the flag column and the help column.
GUTTER = 4
INDENT = " " * 4


def _palette(colorful):
    styles = defaultdict(str, {
        # === Head ===
        "program-name": "bold #FF4D94",  # MAGENTA-PINK → brand pop
        "program-version": "bold #00E6FF",  # CYAN version
        "author": "#9CA3AF",
        "about": "italic #A3A3A3",

        # === Sections ===
        "section-label": "bold #FFFFFF",
        "synopsis": "bold #36C5F0",
        "panel-title": "bold #FF4D94",

        # === Rows ===
        "form": "bold #00E6FF",
        "metavar": "bold #FFD600",  # AMBER for parameters
        "help": "#9CA3AF",
        "default": "dim #9CA3AF",

        # === Errors ===
        "error-label": "bold #FF4DA6",
        "error-message": "#C8C8D0",
        "hint": "italic #9CE19C",
    } | getattr(__import__("__main__"), "__styles__", {}))

    def styler(style):
        return styles[style] if colorful else ""

    def text(fragment, style=""):
        # str or Text metadata; Text keeps its own spans on top of the palette style.
        if not colorful:
            return Text(str(fragment))
        if isinstance(fragment, Text):
            fragment = fragment.copy()
            if style:
                fragment.stylize_before(style)
            return fragment
        return Text(str(fragment), style)

    return styler, text


def _forms(spec, styler):
    """
    Flag column for one spec: '-u, --url <URL>...', '    --stdin', '-v, --verbosity'.
    """
    column = Text()
    if spec.short:
        column.append("-" + spec.short, styler("form"))
        if spec.long:
            column.append(", ")
    else:
        column.append(INDENT)
    if spec.long:
        column.append("--" + spec.long, styler("form"))
    if spec.placeholder:
        column.append(" ")
        column.append(spec.placeholder, styler("metavar"))
    return column


def synopsis(catalog, /, *, colorful=True):
    """
    One-line usage synopsis: program name, [OPTIONS], then the arguments that
    must appear (required ones, and required-unless pairs as '<a|b>').
    """
    styler, text = _palette(colorful)
    line = text(catalog.name, styler("program-name"))
    line.append(" [OPTIONS]", styler("synopsis"))

    for spec in catalog.all():
        for constraint in spec.constraints:
            match constraint:
                case Required():
                    line.append(" ")
                    line.append(spec.signature, styler("synopsis"))
                case RequiredUnless(other):
                    line.append(" <")
                    line.append(spec.signature, styler("synopsis"))
                    line.append("|")
                    line.append(catalog.lookup(other).signature, styler("synopsis"))
                    line.append(">")
    return line


def render_help(catalog, /, *, colorful=True):
    """
    Full help: metadata, usage, one row per spec in declaration order, epilogue.

    The epilogue is appended character-for-character; it is never wrapped or
    re-indented.
    """
    styler, text = _palette(colorful)
    help = Text()

    help.append(text(catalog.name, styler("program-name")))
    if catalog.version:
        help.append(" ")
        help.append(text(catalog.version, styler("program-version")))
    help.append("\n")
    if catalog.author:
        help.append(text(catalog.author, styler("author")))
        help.append("\n")
    if catalog.about:
        help.append(text(catalog.about, styler("about")))
        help.append("\n")

    help.append("\n")
    help.append("USAGE:", styler("section-label"))
    help.append("\n" + INDENT)
    help.append(synopsis(catalog, colorful=colorful))
    help.append("\n\n")

    help.append("OPTIONS:", styler("section-label"))
    help.append("\n")
    columns = [(spec, _forms(spec, styler)) for spec in catalog.all()]
    width = max((len(column) for _, column in columns), default=0) + GUTTER
    for spec, column in columns:
        help.append(INDENT)
        help.append(column)
        if spec.help or spec.default:
            help.append(" " * (width - len(column)))
            if spec.help:
                help.append(text(spec.help, styler("help")))
            if spec.default:
                help.append(" " if spec.help else "")
                help.append(text("(default: %s)" % spec.default, styler("default")))
        help.append("\n")

    if catalog.epilog:
        help.append("\n")
        help.append(text(catalog.epilog))

    return help


def render_version(catalog, /, *, colorful=True):
    """
    Program name and version only.
    """
    styler, text = _palette(colorful)
    version = text(catalog.name, styler("program-name"))
    if catalog.version:
        version.append(" ")
        version.append(text(catalog.version, styler("program-version")))
    return version


def render_usage(catalog, fault=None, /, *, colorful=True):
    """
    Usage block written to stderr when parsing fails.

        error: <message>
         → <hint>

        USAGE:
            <synopsis>

        For more information try --help
    """
    styler, text = _palette(colorful)
    usage = Text()

    if fault is not None:
        usage.append("error:", styler("error-label"))
        usage.append(" ")
        usage.append(str(fault), styler("error-message"))
        usage.append("\n")
        if hint := getattr(fault, "options", {}).get("hint"):
            usage.append(" → " + hint, styler("hint"))
            usage.append("\n")
        usage.append("\n")

    usage.append("USAGE:", styler("section-label"))
    usage.append("\n" + INDENT)
    usage.append(synopsis(catalog, colorful=colorful))
    usage.append("\n\n")

    help = next((spec for spec in catalog.all() if spec.name == "help" and spec.switch), None)
    if help is not None:
        usage.append("For more information try %s" % help.forms[-1])
    return usage


def framed(catalog, renderable, /, *, label="help", colorful=True):
    """
    Wrap a renderable in a Panel titled '[ NAME LABEL ]' (fancy output).
    """
    styler, text = _palette(colorful)
    title = Text.assemble("[ ", text(f"{catalog.name} {label}".upper(), styler("panel-title")), " ]")
    return Panel(renderable, title=title, title_align="left")


__all__ = (
    "synopsis",
    "render_help",
    "render_version",
    "render_usage",
    "framed",
)
