import logging

from unittest.mock import patch

from clargs.util import LOG_FORMAT, enable_logging, is_flag, log


class util:
    class is_flag_:
        def true_for_short_and_long_flags(self):
            for token in ("-a", "-abc", "--name", "--", "-"):
                assert is_flag(token)

        def false_for_bare_values(self):
            for token in ("value", "", "a-b", " -a"):
                assert not is_flag(token)

    class logging_:
        def logger_is_named_after_package(self):
            assert log.name == "clargs"

        @patch("clargs.util.logging.basicConfig")
        def enable_logging_turns_on_debug_output(self, basicConfig):
            enable_logging()
            basicConfig.assert_called_once_with(
                level=logging.DEBUG, format=LOG_FORMAT
            )
