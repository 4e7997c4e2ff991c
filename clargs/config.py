import copy
import json
import os
from os.path import expanduser, splitext

import yaml
from lexicon import AttributeDict

from .exceptions import AmbiguousMergeError, UncastableEnvVar, UnknownFileType
from .util import debug


class Config:
    """
    Layered configuration for the ``clargs`` program.

    Values come from several levels, merged lowest to highest:

    - defaults (`global_defaults` unless ``defaults`` is given);
    - system-level config file, e.g. ``/etc/clargs.yaml``;
    - user-level config file, e.g. ``~/.clargs.yaml``;
    - runtime config file, an explicit path (see `set_runtime_path`);
    - shell environment, e.g. ``CLARGS_REPORT_TITLE`` (see `load_shell_env`);
    - ``overrides`` given at init time (or later via `load_overrides`); the
      ``clargs`` program itself never sets any, so this level is for library
      use.

    Files may be YAML (``.yaml``/``.yml``) or JSON (``.json``); for the
    system and user levels the first extension found wins.

    Merged values are readable via dict or attribute syntax::

        config['report']['title']
        config.report.title

    **Special class attributes**

    - ``prefix``: basename of config files (``clargs``) and, uppercased, the
      env var prefix (``CLARGS_``).
    - ``env_prefix``: overrides the env var half of ``prefix``.
    """

    prefix = "clargs"
    env_prefix = None

    @staticmethod
    def global_defaults():
        """
        Return the core default settings.

        Subclasses may override, calling ``Config.global_defaults`` and
        applying `merge_dicts` to the result, to add to or modify these.
        """
        return {
            "debug": False,
            "report": {"title": "Arguments:", "sort": False},
        }

    def __init__(
        self,
        overrides=None,
        defaults=None,
        system_prefix=None,
        user_prefix=None,
        runtime_path=None,
        lazy=False,
    ):
        """
        :param dict overrides: Highest-priority values.
        :param dict defaults: Replaces `global_defaults` when given.
        :param str system_prefix:
            Path prefix for the system config file; defaults to ``/etc/``.
        :param str user_prefix:
            Path prefix for the user config file; defaults to ``~/.``.
        :param str runtime_path: Explicit config file path, loaded last.
        :param bool lazy:
            If ``True``, skip loading system & user files at init time.
        """
        self._defaults = (
            self.global_defaults() if defaults is None else copy_dict(defaults)
        )
        self._overrides = {} if overrides is None else copy_dict(overrides)
        self._system_prefix = (
            "/etc/" if system_prefix is None else system_prefix
        )
        self._user_prefix = "~/." if user_prefix is None else user_prefix
        self._runtime_path = runtime_path
        self._system = {}
        self._user = {}
        self._runtime = {}
        self._env = {}
        self._config = AttributeDict()
        if not lazy:
            self.load_system(merge=False)
            self.load_user(merge=False)
        self.merge()

    @property
    def _env_prefix(self):
        return "{}_".format((self.env_prefix or self.prefix).upper())

    def load_system(self, merge=True):
        self._system = self._load_prefixed(self._system_prefix)
        if merge:
            self.merge()

    def load_user(self, merge=True):
        self._user = self._load_prefixed(self._user_prefix)
        if merge:
            self.merge()

    def set_runtime_path(self, path):
        self._runtime_path = path

    def load_runtime(self, merge=True):
        """
        Load the file at the runtime path, if one was set.

        Unlike system/user files, the extension must be a known one.
        """
        if self._runtime_path is None:
            debug("No runtime config path set, skipping")
            return
        self._runtime = self._load_file(self._runtime_path, absolute=True)
        if merge:
            self.merge()

    def load_overrides(self, data, merge=True):
        self._overrides = copy_dict(data)
        if merge:
            self.merge()

    def load_shell_env(self):
        """
        Load values from the shell environment.

        Only keys already known from the other levels are sought, named by
        joining their key path with underscores under the env prefix; e.g.
        ``report.title`` is read from ``CLARGS_REPORT_TITLE``. Values are cast
        to the type of the value they replace.
        """
        # Env var names are derived from known keys, so merge first.
        self.merge()
        self._env = self._crawl_env([], self._config)
        debug("Loaded shell environment: {!r}".format(self._env))
        self.merge()

    def _crawl_env(self, keypath, data):
        found = {}
        for key, value in data.items():
            path = keypath + [key]
            if isinstance(value, dict):
                nested = self._crawl_env(path, value)
                if nested:
                    found[key] = nested
                continue
            name = self._env_prefix + "_".join(path).upper()
            if name in os.environ:
                found[key] = _cast(value, os.environ[name], name)
        return found

    def _load_prefixed(self, prefix):
        for ext in ("yaml", "yml", "json"):
            data = self._load_file("{}{}.{}".format(prefix, self.prefix, ext))
            if data is not None:
                return data
        return {}

    def _load_file(self, path, absolute=False):
        path = expanduser(path)
        type_ = splitext(path)[1].lstrip(".")
        loader = getattr(self, "_load_{}".format(type_), None)
        if loader is None:
            if absolute:
                raise UnknownFileType(path)
            return None
        try:
            data = loader(path)
        except FileNotFoundError:
            debug("Didn't see any {}, skipping.".format(path))
            return {} if absolute else None
        debug("Loaded {}, got {!r}".format(path, data))
        # Empty YAML files load as None
        return data or {}

    def _load_yaml(self, path):
        with open(path) as fd:
            return yaml.safe_load(fd)

    _load_yml = _load_yaml

    def _load_json(self, path):
        with open(path) as fd:
            return json.load(fd)

    def merge(self):
        """
        Merge all config levels into the data exposed by this object.
        """
        merged = {}
        for name in (
            "defaults",
            "system",
            "user",
            "runtime",
            "env",
            "overrides",
        ):
            level = getattr(self, "_{}".format(name))
            debug("Merging {} level: {!r}".format(name, level))
            merge_dicts(merged, level)
        self._config = _attrify(merged)

    def __getattr__(self, key):
        # Only reached for names not found normally; guard the private
        # attributes so half-initialized objects don't recurse.
        if key.startswith("_"):
            raise AttributeError(key)
        try:
            return self._config[key]
        except KeyError:
            err = "No attribute or config key found for {!r}".format(key)
            raise AttributeError(err)

    def __getitem__(self, key):
        return self._config[key]

    def __contains__(self, key):
        return key in self._config

    def get(self, key, default=None):
        return self._config.get(key, default)

    def __repr__(self):
        return "<{}: {!r}>".format(self.__class__.__name__, dict(self._config))


def _cast(old, new_, name):
    if isinstance(old, bool):
        return new_ not in ("0", "")
    elif old is None or isinstance(old, str):
        return new_
    elif isinstance(old, (list, tuple, dict)):
        err = "Can't adapt an environment string into a {}!"
        raise UncastableEnvVar("{}: {}".format(name, err.format(type(old))))
    return old.__class__(new_)


def _attrify(data):
    return AttributeDict(
        (key, _attrify(value) if isinstance(value, dict) else value)
        for key, value in data.items()
    )


def merge_dicts(base, updates):
    """
    Recursively merge dict ``updates`` into dict ``base`` (mutating ``base``.)

    * Values which are themselves dicts will be recursed into.
    * Values which are a dict in one input and *not* a dict in the other input
      (e.g. ``{'foo': 5}`` and ``{'foo': {'bar': 5}}``) are irreconciliable
      and raise `.AmbiguousMergeError`.
    * Non-dict leaf values are run through `copy.copy` to avoid state bleed.

    :returns: The value of ``base``.
    """
    for key, value in updates.items():
        if key in base:
            if isinstance(value, dict):
                if isinstance(base[key], dict):
                    merge_dicts(base[key], value)
                else:
                    raise _merge_error(base[key], value)
            else:
                if isinstance(base[key], dict):
                    raise _merge_error(base[key], value)
                else:
                    base[key] = copy.copy(value)
        # New values get set anew
        else:
            if isinstance(value, dict):
                base[key] = copy_dict(value)
            else:
                base[key] = copy.copy(value)
    return base


def _merge_error(orig, new_):
    return AmbiguousMergeError(
        "Can't cleanly merge {} with {}".format(
            _format_mismatch(orig), _format_mismatch(new_)
        )
    )


def _format_mismatch(x):
    return "{} ({!r})".format(type(x), x)


def copy_dict(source):
    """
    Return a fresh copy of ``source`` with as little shared state as possible.
    """
    return merge_dicts({}, source)
