import logging
import os

import pytest
from unittest.mock import patch


# pytest seems to tweak logging such that our debug logs go to stderr, which is
# then hella spammy if one is using --capture=no. So, we explicitly turn
# default logging back down.
logging.basicConfig(level=logging.INFO)


@pytest.fixture(autouse=True)
def fake_user_home():
    # Ignore any real user homedir for purpose of testing, so a developer's
    # own ~/.clargs.yaml can't change test results.
    with patch("clargs.config.expanduser", side_effect=lambda x: x):
        yield


@pytest.fixture(autouse=True)
def reset_environ():
    """
    Resets `os.environ` to its prior state after the fixtured test finishes.

    Also drops any ``CLARGS_*`` vars from the outer shell beforehand.
    """
    old_environ = os.environ.copy()
    for key in list(os.environ):
        if key.startswith("CLARGS_"):
            del os.environ[key]
    yield
    os.environ.clear()
    os.environ.update(old_environ)
