from collections import namedtuple

from .exceptions import OrphanValueError
from .store import ArgumentStore
from .util import debug, is_flag


class Parser:
    """
    Turn argv-style token lists into `.ArgumentStore` objects.

    No schema of expected flags is involved; every token is classified purely
    by its shape:

    - ``-abc`` is a bundle of single-character flags ``a``, ``b`` and ``c``
      (these never take values);
    - ``--verbose`` followed by another dash-prefixed token, or by nothing, is
      a multi-character flag;
    - ``--name John Doe`` pairs ``name`` with every following bare token,
      joined with single spaces (``"John Doe"``).

    :param store_class:
        The `.ArgumentStore` subclass results are built with. Defaults to
        `.ArgumentStore`.
    """

    def __init__(self, store_class=None):
        self.store_class = store_class or ArgumentStore

    def parse_argv(self, argv):
        """
        Parse an argv-style token list ``argv``.

        Assumes any program name has already been stripped out. Good::

            Parser().parse_argv(['--name', 'John', 'Doe', '-v'])

        Bad::

            Parser().parse_argv(['myprogram', '--name', ...])

        :returns: An `.ArgumentStore` of everything seen.
        :raises:
            `.OrphanValueError` if a bare value shows up before any ``--key``
            could receive it.
        """
        machine = ParseMachine(store=self.store_class())
        self._scan(argv, machine)
        return machine.store

    def attempt(self, argv):
        """
        Parse ``argv`` like `parse_argv`, but return errors instead of raising.

        :returns:
            A `.ParseOutcome` whose ``error`` is ``None`` on success. On
            failure, ``store`` holds whatever was parsed before the offending
            token.
        """
        machine = ParseMachine(store=self.store_class())
        try:
            self._scan(argv, machine)
        except OrphanValueError as e:
            msg = "Parse attempt failed, returning partial store: {!r}"
            debug(msg.format(e))
            return ParseOutcome(machine.store, e)
        return ParseOutcome(machine.store, None)

    def _scan(self, argv, machine):
        # Copy so callers' lists are never touched & so we can index ahead.
        tokens = list(argv)
        debug("Starting argv: {!r}".format(tokens))
        for index, token in enumerate(tokens):
            upcoming = tokens[index + 1] if index + 1 < len(tokens) else None
            machine.handle(token, index, upcoming)
        machine.finish()


class ParseMachine:
    """
    Per-parse scanning state: the currently open ``--key`` (if any) and the
    value fragments gathered for it so far.
    """

    def __init__(self, store):
        self.store = store
        self.key = None
        self.fragments = []

    @property
    def waiting_for_value(self):
        return self.key is not None

    def handle(self, token, index, upcoming=None):
        """
        Consume ``token``, peeking at ``upcoming`` (``None`` at end of argv).
        """
        debug("Handling token: {!r}".format(token))
        if is_flag(token):
            # Whatever key was open never got a value; it's a plain flag.
            self.complete_flag()
            name = token[1:]
            if is_flag(name):
                self.switch_to_key(name[1:])
            else:
                self.see_flag_cluster(name)
        elif self.waiting_for_value:
            self.see_value(token, upcoming)
        else:
            debug("No open key for {!r}, erroring".format(token))
            raise OrphanValueError(token, index)

    def finish(self):
        if not self.waiting_for_value:
            return
        if self.fragments:
            self.complete_pair()
        else:
            self.complete_flag()

    def switch_to_key(self, key):
        debug("Moving to key {!r}".format(key))
        self.key = key

    def see_flag_cluster(self, cluster):
        # Single-char flags are committed right away; they never take values.
        for char in cluster:
            debug("Marking seen short flag {!r}".format(char))
            self.store.add(char)

    def see_value(self, value, upcoming):
        self.fragments.append(value)
        # Only a following flag (or end of argv) tells us the value is over.
        if upcoming is None or is_flag(upcoming):
            self.complete_pair()
        else:
            debug("Value for {!r} continues past {!r}".format(self.key, value))

    def complete_flag(self):
        if self.key is None:
            return
        debug("Key {!r} saw no value, storing as flag".format(self.key))
        self.store.add(self.key)
        self.key = None

    def complete_pair(self):
        value = " ".join(self.fragments)
        debug("Setting key {!r} to value {!r}".format(self.key, value))
        self.store.add(self.key, value)
        self.key = None
        self.fragments = []


class ParseOutcome(namedtuple("ParseOutcome", "store error")):
    """
    Result of `.Parser.attempt`: an `.ArgumentStore` plus any parse error.
    """

    __slots__ = ()

    @property
    def ok(self):
        return self.error is None

    def unwrap(self):
        """
        Return ``store`` if the parse succeeded, otherwise raise ``error``.
        """
        if self.error is not None:
            raise self.error
        return self.store


def parse(argv):
    """
    Shorthand for ``Parser().parse_argv(argv)``.
    """
    return Parser().parse_argv(argv)
