r"""
Argument table of the feroxbuster content discovery tool.

The catalog is assembled once, at import, from the static SPECS table and
finalized immediately; a defect in the table fails the import.

Entry point
- main(tokens=Unset): parse sys.argv[1:] (or `tokens`) the way the tool does.
"""
from .arguments import ArgumentSpec, Arity, RequiredUnless, ConflictsWith
from .catalog import Catalog
from .parser import run
from .utils import Unset

NAME = "feroxbuster"
VERSION = "1.0.0"
AUTHOR = "epi (@epi052)"
ABOUT = "A fast, simple, recursive content discovery tool written in Rust"

EPILOG = r"""NOTE:
    Options that take multiple values are very flexible.  Consider the following ways of specifying
    extensions:
        ./feroxbuster -u http://127.1 -x pdf -x js,html -x php txt json,docx

    The command above adds .pdf, .js, .html, .php, .txt, .json, and .docx to each url

    All of the methods above (multiple flags, space separated, comma separated, etc...) are valid
    and interchangeable.  The same goes for urls, headers, status codes, and size filters.

EXAMPLES:
    Multiple headers:
        ./feroxbuster -u http://127.1 -H Accept:application/json "Authorization: Bearer {token}"

    IPv6, non-recursive scan with INFO-level logging enabled:
        ./feroxbuster -u http://[::1] --norecursion -vv

    Read urls from STDIN; pipe only resulting urls out to another tool
        cat targets | ./feroxbuster --stdin --quiet -s 200 301 302 --redirects -x js | fff -s 200 -o js-files

    Proxy traffic through Burp
        ./feroxbuster -u http://127.1 --insecure -p http://127.0.0.1:8080

    Ludicrous speed... go!
        ./feroxbuster -u http://127.1 -t 200
    """

SPECS = (
    ArgumentSpec(
        "wordlist", "w", "wordlist",
        arity=Arity.ONE,
        metavar="FILE",
        help="Path to the wordlist",
    ),
    ArgumentSpec(
        "url", "u", "url",
        arity=Arity.MANY,
        delimited=True,
        metavar="URL",
        help="The target URL(s) (required, unless --stdin used)",
        constraints=(RequiredUnless("stdin"),),
    ),
    ArgumentSpec(
        "threads", "t", "threads",
        arity=Arity.ONE,
        metavar="THREADS",
        help="Number of concurrent threads",
        default="50",
    ),
    ArgumentSpec(
        "depth", "d", "depth",
        arity=Arity.ONE,
        metavar="RECURSION_DEPTH",
        help="Maximum recursion depth, a depth of 0 is infinite recursion",
        default="4",
    ),
    ArgumentSpec(
        "timeout", "T", "timeout",
        arity=Arity.ONE,
        metavar="SECONDS",
        help="Number of seconds before a request times out",
        default="7",
    ),
    ArgumentSpec(
        "verbosity", "v", "verbosity",
        counted=True,
        help="Increase verbosity level (use -vv or more for greater effect)",
    ),
    ArgumentSpec(
        "proxy", "p", "proxy",
        arity=Arity.ONE,
        metavar="PROXY",
        help="Proxy to use for requests (ex: http(s)://host:port, socks5://host:port)",
    ),
    ArgumentSpec(
        "statuscodes", "s", "statuscodes",
        arity=Arity.MANY,
        delimited=True,
        metavar="STATUS_CODE",
        help="Status Codes of interest",
        default="200 204 301 302 307 308 401 403 405",
    ),
    ArgumentSpec(
        "quiet", "q", "quiet",
        help="Only print URLs; Don't print status codes, response size, running config, etc...",
    ),
    ArgumentSpec(
        "output", "o", "output",
        arity=Arity.ONE,
        metavar="FILE",
        help="Output file to write results to",
        default="stdout",
    ),
    ArgumentSpec(
        "useragent", "a", "useragent",
        arity=Arity.ONE,
        metavar="USER_AGENT",
        help="Sets the User-Agent",
        default="feroxbuster/VERSION",
    ),
    ArgumentSpec(
        "redirects", "r", "redirects",
        help="Follow redirects",
    ),
    ArgumentSpec(
        "insecure", "k", "insecure",
        help="Disables TLS certificate validation",
    ),
    ArgumentSpec(
        "extensions", "x", "extensions",
        arity=Arity.MANY,
        delimited=True,
        metavar="FILE_EXTENSION",
        help="File extension(s) to search for (ex: -x php -x pdf js)",
    ),
    ArgumentSpec(
        "headers", "H", "headers",
        arity=Arity.MANY,
        delimited=True,
        metavar="HEADER",
        help="Specify HTTP headers (ex: -H Header:val 'stuff: things')",
    ),
    ArgumentSpec(
        "norecursion", "n", "norecursion",
        help="Do not scan recursively",
    ),
    ArgumentSpec(
        "addslash", "f", "addslash",
        help="Append / to each request",
    ),
    ArgumentSpec(
        "stdin", Unset, "stdin",
        help="Read url(s) from STDIN",
        constraints=(ConflictsWith("url"),),
    ),
    ArgumentSpec(
        "sizefilters", "S", "sizefilter",
        arity=Arity.MANY,
        delimited=True,
        metavar="SIZE",
        help="Filter out messages of a particular size (ex: -S 5120 -S 4927,1970)",
    ),
)

CATALOG = Catalog.build(SPECS, NAME, VERSION, AUTHOR, ABOUT, EPILOG)


def main(tokens=Unset, /, **options):
    """
    Parse the tool's command line; see feroxargs.parser.run for `options`.
    """
    return run(CATALOG, tokens, **options)


__all__ = (
    "NAME",
    "VERSION",
    "AUTHOR",
    "ABOUT",
    "EPILOG",
    "SPECS",
    "CATALOG",
    "main",
)
