import os
import sys

from .config import Config
from .exceptions import Exit, ParseError
from .parser import Parser
from .util import debug, enable_logging


class Program:
    """
    Manages top-level CLI invocation, typically via ``setup.py`` entrypoints.

    Parses everything after the binary name with `.Parser` and prints the
    resulting `.ArgumentStore` as a report, e.g.::

        $ clargs -ab --name John Doe --verbose
        Arguments:
          K: -a
          K: -b
          P: --name John Doe
          K: --verbose

    ``--help``/``-h`` and ``--version``/``-V`` are handled by the program
    itself instead of being reported.
    """

    def __init__(
        self, version=None, name=None, binary=None, config_class=None
    ):
        """
        Create a new, parameterized `.Program` instance.

        :param str version:
            The program's version, e.g. ``"0.1.0"``. Defaults to ``"unknown"``.

        :param str name:
            The program's name, as displayed in ``--version`` output.

            If ``None`` (default), is a capitalized version of the first word
            in the ``argv`` handed to `.run`.

        :param str binary:
            The binary name as displayed in ``--help`` output.

            If ``None`` (default), uses the first word in ``argv`` verbatim.

        :param config_class:
            The `.Config` subclass to use for the base config object.

            Defaults to `.Config`.
        """
        self.version = "unknown" if version is None else version
        self._name = name
        self._binary = binary
        self.argv = None
        self.store = None
        self.config_class = config_class or Config

    def create_config(self):
        """
        Instantiate a `.Config` (or subclass, depending) and load env vars.

        A runtime config file may be named via the ``CLARGS_CONFIG`` env var;
        since every flag given is reported, there is no CLI flag for it.

        :returns: ``None``; sets ``self.config`` instead.
        """
        self.config = self.config_class()
        runtime_path = os.environ.get("CLARGS_CONFIG")
        if runtime_path:
            debug("Using runtime config file {!r}".format(runtime_path))
            self.config.set_runtime_path(runtime_path)
            self.config.load_runtime(merge=False)
        self.config.load_shell_env()

    def run(self, argv=None, exit=True):
        """
        Execute main CLI logic, based on ``argv``.

        :param argv:
            The arguments to execute against. May be ``None``, a list of
            strings, or a string. See `.normalize_argv` for details.

        :param bool exit:
            When ``False`` (default: ``True``), will ignore `.ParseError` and
            `.Exit` exceptions, which otherwise trigger calls to `sys.exit`.
        """
        try:
            self.create_config()
            if self.config.get("debug"):
                enable_logging()
            self.normalize_argv(argv)
            self.parse_argv()
            self.parse_cleanup()
            self.print_report()
        except (Exit, ParseError) as e:
            debug("Received a possibly-skippable exception: {!r}".format(e))
            if isinstance(e, ParseError):
                print(e, file=sys.stderr)
            if exit:
                code = e.code if isinstance(e, Exit) else 1
                sys.exit(code)
            else:
                debug("Invoked as run(..., exit=False), ignoring exception")
        except KeyboardInterrupt:
            sys.exit(1)  # Same behavior as Python itself outside of REPL

    def normalize_argv(self, argv):
        """
        Massages ``argv`` into a useful list of strings.

        **If None** (the default), uses `sys.argv`.

        **If a non-string iterable**, uses that in place of `sys.argv`.

        **If a string**, performs a `str.split` and then executes with the
        result. (This is mostly a convenience; when in doubt, use a list.)

        Sets ``self.argv`` to the result.
        """
        if argv is None:
            argv = sys.argv
            debug("argv was None; using sys.argv: {!r}".format(argv))
        elif isinstance(argv, str):
            argv = argv.split()
            debug("argv was string-like; splitting: {!r}".format(argv))
        self.argv = list(argv)

    def parse_argv(self):
        """
        Parse everything after the binary name; sets ``self.store``.
        """
        self.store = Parser().parse_argv(self.argv[1:])
        debug("Parse result: {!r}".format(self.store))

    def parse_cleanup(self):
        """
        Handle the program's own flags, which bail out before reporting.
        """
        if self.store.exists("help", "h"):
            debug("Saw --help, printing usage & exiting")
            self.print_help()
            raise Exit
        if self.store.exists("version", "V"):
            debug("Saw --version, printing version & exiting")
            self.print_version()
            raise Exit

    @property
    def name(self):
        """
        Derive program's human-readable name based on `.binary`.
        """
        return self._name or self.binary.capitalize()

    @property
    def binary(self):
        """
        Derive program's help-oriented binary name(s) from init args & argv.
        """
        return self._binary or os.path.basename(self.argv[0])

    def print_version(self):
        print("{} {}".format(self.name, self.version or "unknown"))

    def print_help(self):
        print("Usage: {} [-abc] [--flag] [--key value ...] ...".format(
            self.binary
        ))
        print("")
        print("Prints a report of the flags and key/value pairs given.")
        print("")
        print("  -h, --help       Show this help message and exit.")
        print("  -V, --version    Show version and exit.")

    def print_report(self):
        report = self.config.report
        print(self.store.render(title=report.title, sort=report.sort), end="")
