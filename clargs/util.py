import logging
import os


LOG_FORMAT = "%(name)s.%(module)s.%(funcName)s: %(message)s"


def enable_logging():
    logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT)


# Allow from-the-start debugging (vs toggled later by the CLI or config) via
# shell env var.
if os.environ.get("CLARGS_DEBUG"):
    enable_logging()

# Add top level logger functions to global namespace. Meh.
log = logging.getLogger("clargs")
for x in ("debug",):
    globals()[x] = getattr(log, x)


def is_flag(value):
    return value.startswith("-")
