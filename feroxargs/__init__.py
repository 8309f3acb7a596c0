__title__ = 'feroxargs'
__author__ = 'feroxargs contributors'
__license__ = 'MIT'
__version__ = "1.0.0"

from .arguments import *
from .catalog import *
from .collector import *
from .configuration import *
from .constraints import *
from .faults import *
from .parser import *
from .render import *

VersionInfo = __import__("collections").namedtuple("VersionInfo", (
    "major",
    "minor",
    "micro",
    "releaselevel",
    "serial",
    "metadata"
))

version_info = VersionInfo(1, 0, 0, "final", 0, "")

__all__ = (
    "__title__",
    "__author__",
    "__license__",
    "__version__",
    "version_info"
)

# Load the exposed API of the arguments
__all__ += arguments.__all__  # type: ignore[attr-defined]
# Load the exposed API of the catalog
__all__ += catalog.__all__  # type: ignore[attr-defined]
# Load the exposed API of the collector
__all__ += collector.__all__  # type: ignore[attr-defined]
# Load the exposed API of the configuration
__all__ += configuration.__all__  # type: ignore[attr-defined]
# Load the exposed API of the constraints
__all__ += constraints.__all__  # type: ignore[attr-defined]
# Load the exposed API of the faults
__all__ += faults.__all__  # type: ignore[attr-defined]
# Load the exposed API of the parser
__all__ += parser.__all__  # type: ignore[attr-defined]
# Load the exposed API of the renderers
__all__ += render.__all__  # type: ignore[attr-defined]
