"""
`python -m feroxargs [ARGS...]`: parse a feroxbuster command line and show
the resolved configuration.
"""
from rich.pretty import pprint

from . import logs
from .feroxbuster import main

if __name__ == '__main__':
    configuration = main()
    logs.configure(configuration.occurrences_of("verbosity"))
    logs.logger.info("parsed %d arguments", len(configuration))
    pprint(configuration)
