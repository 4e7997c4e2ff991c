"""
The ``clargs`` 'binary' entrypoint.

Dogfoods the `program` module.
"""

from . import __version__, Program

program = Program(name="Clargs", binary="clargs", version=__version__)
