"""
Custom exception classes.

These vary in use case from "a parse hit input it has no interpretation for"
to simply "we needed to express an error condition in a way easily told apart
from other, truly unexpected errors".
"""


class ParseError(Exception):
    """
    An error arising from the parsing of command-line tokens.

    :param str msg: Human-readable description of the problem.
    :param str token: The offending token, if any.
    :param int index: Position of ``token`` within the parsed sequence.
    """

    def __init__(self, msg, token=None, index=None):
        super().__init__(msg)
        self.token = token
        self.index = index


class OrphanValueError(ParseError):
    """
    A bare value token was seen before any ``--key`` was opened to receive it.

    E.g. the leading ``loose`` in ``["loose", "--name", "value"]``.
    """

    def __init__(self, token, index=None):
        msg = "Can't parse a value without a key: {!r}".format(token)
        if index is not None:
            msg += " (at position {})".format(index)
        super().__init__(msg, token=token, index=index)


class Exit(Exception):
    """
    Simple stand-in for SystemExit that lets us gracefully exit.

    Removes lots of scattered sys.exit calls, improves testability.
    """

    def __init__(self, code=0):
        self.code = code


class UnknownFileType(ValueError):
    """
    A config file of an unknown file type was specified and cannot be loaded.
    """

    def __init__(self, path):
        self.path = path

    def __str__(self):
        return "Unable to load config file {!r}: unknown file type".format(
            self.path
        )


class AmbiguousMergeError(ValueError):
    pass


class UncastableEnvVar(Exception):
    """
    Raised on attempted env var loads whose default values are too rich.

    E.g. trying to stuff ``CLARGS_FOO=bar`` into ``{'foo': {'bar': True}}``
    is meaningless.
    """

    pass
