from collections import namedtuple
from enum import Enum

from lexicon import Lexicon


class Kind(Enum):
    """
    What sort of argument a given key was seen as.

    ``NONE`` is never stored; it's what lookups hand back for absent keys.
    """

    FLAG = "flag"
    PAIR = "pair"
    NONE = "none"

    @property
    def is_flag(self):
        return self is Kind.FLAG

    @property
    def is_pair(self):
        return self is Kind.PAIR


class Entry(namedtuple("Entry", "key kind value")):
    """
    A single parsed argument: a ``key``, its `.Kind` and (for pairs) ``value``.

    Build via `Entry.flag` / `Entry.pair` rather than directly; they uphold the
    rule that flags never carry a value and pairs always do.
    """

    __slots__ = ()

    @classmethod
    def flag(cls, key):
        return cls(key, Kind.FLAG, None)

    @classmethod
    def pair(cls, key, value):
        if value is None:
            raise ValueError("Pair {!r} must be given a value!".format(key))
        return cls(key, Kind.PAIR, value)

    def render(self):
        if self.kind.is_pair:
            return "P: --{} {}".format(self.key, self.value)
        dashes = "-" if len(self.key) == 1 else "--"
        return "K: {}{}".format(dashes, self.key)


class ArgumentStore:
    """
    Key-to-`.Entry` mapping produced by `.Parser.parse_argv`.

    Keys are stored without their leading dashes and are case-sensitive.
    Adding a key which already exists replaces its entry, so the last
    occurrence in an argv wins. Iteration follows the order in which each key
    was first added.

    Once handed back from a parse, a store is meant to be read-only; `add`
    exists for building stores programmatically (e.g. in tests).
    """

    def __init__(self):
        self._entries = Lexicon()

    def add(self, key, value=None):
        """
        Store ``key`` as a flag, or as a pair when ``value`` is given.

        Any string is accepted as a key, including the empty string.

        :returns: The store itself, for chaining.
        """
        if value is None:
            entry = Entry.flag(key)
        else:
            entry = Entry.pair(key, value)
        self._entries[key] = entry
        return self

    def get(self, key):
        """
        Return the value stored for ``key``.

        Returns ``None`` both when ``key`` is absent and when it's a flag;
        use `kind_of` or `exists` to tell those apart.
        """
        entry = self._entries.get(key)
        return None if entry is None else entry.value

    def get_or_default(self, key, default):
        value = self.get(key)
        return default if value is None else value

    def kind_of(self, key, alt=None):
        """
        Return the `.Kind` of ``key``, falling back to ``alt`` if it's absent.

        ``Kind.NONE`` means neither was found.
        """
        if key in self._entries:
            return self._entries[key].kind
        if alt is not None and alt in self._entries:
            return self._entries[alt].kind
        return Kind.NONE

    def exists(self, key, alt=None):
        if key in self._entries:
            return True
        return alt is not None and alt in self._entries

    def keys(self):
        """
        Return a snapshot `set` of all stored keys.
        """
        return set(self._entries)

    @property
    def entries(self):
        """
        The underlying `~lexicon.Lexicon` of key to `.Entry`.

        Allows attribute-style access, e.g. ``store.entries.verbose.kind``.
        """
        return self._entries

    def render(self, title="Arguments:", sort=False):
        """
        Display entries as a multi-line report headed by ``title``.

        Each entry gets its own indented line: ``K: -x`` or ``K: --name`` for
        flags (depending on key length) and ``P: --name value`` for pairs.

        :param bool sort: List entries sorted by key instead of as added.
        """
        keys = sorted(self._entries) if sort else list(self._entries)
        lines = [title]
        for key in keys:
            lines.append("  {}".format(self._entries[key].render()))
        return "\n".join(lines) + "\n"

    def __getitem__(self, key):
        return self._entries[key]

    def __contains__(self, key):
        return key in self._entries

    def __iter__(self):
        return iter(list(self._entries))

    def __len__(self):
        return len(self._entries)

    def __eq__(self, other):
        if not isinstance(other, ArgumentStore):
            return NotImplemented
        return dict(self._entries) == dict(other._entries)

    __hash__ = None

    def __str__(self):
        return self.render()

    def __repr__(self):
        entries = ", ".join(
            "{!r}: {}".format(key, entry.kind.name)
            for key, entry in self._entries.items()
        )
        return "<{}: {{{}}}>".format(self.__class__.__name__, entries)
