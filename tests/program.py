import os
import sys
from os.path import join

from unittest.mock import patch
from pytest import raises
from pytest_relaxed import trap

from clargs import ArgumentStore, Config, Exit, Program
from clargs import main

from _util import configs, expect, run


class Program_:
    class init:
        "__init__"

        def may_specify_version(self):
            assert Program(version="1.2.3").version == "1.2.3"

        def default_version_is_unknown(self):
            assert Program().version == "unknown"

        def may_specify_name(self):
            assert Program(name="Myapp").name == "Myapp"

        def may_specify_binary(self):
            assert Program(binary="myapp").binary == "myapp"

        def config_class_defaults_to_Config(self):
            assert Program().config_class is Config

        def may_specify_config_class(self):
            klass = object()
            assert Program(config_class=klass).config_class == klass

    class miscellaneous:
        "miscellaneous behaviors"

        def debug_flag_is_not_special(self):
            expect("--debug", out="Arguments:\n  K: --debug\n")

        def similar_flag_names_are_reported(self):
            # Only the exact help & version flags bail out
            expect("--versions 2", out="Arguments:\n  P: --versions 2\n")

    class normalize_argv:
        @patch("clargs.program.sys")
        def defaults_to_sys_argv(self, mock_sys):
            argv = ["clargs", "--version"]
            mock_sys.argv = argv
            p = Program()
            p.print_version = lambda: None
            p.run(exit=False)
            assert p.argv == argv

        def uses_a_list_unaltered(self):
            p = Program()
            p.print_version = lambda: None
            p.run(["clargs", "--version"], exit=False)
            assert p.argv == ["clargs", "--version"]

        def splits_a_string(self):
            p = Program()
            p.print_version = lambda: None
            p.run("clargs --version", exit=False)
            assert p.argv == ["clargs", "--version"]

    class name:
        def defaults_to_capitalized_argv_when_None(self):
            expect("clargs --version", out="Clargs unknown\n", binary=False)

        def benefits_from_binary_absolute_behavior(self):
            "benefits from binary()'s absolute path behavior"
            expect(
                "/usr/local/bin/myapp --version",
                out="Myapp unknown\n",
                binary=False,
            )

        def uses_overridden_value_when_given(self):
            p = Program(name="NotClargs")
            expect("--version", out="NotClargs unknown\n", program=p)

    class binary:
        def defaults_to_argv_when_None(self):
            stdout, _ = run("myapp --help", binary=False)
            assert "myapp [-abc]" in stdout

        def uses_overridden_value_when_given(self):
            stdout, _ = run("--help", program=Program(binary="nope"))
            assert "nope [-abc]" in stdout

        def use_binary_basename_when_invoked_absolutely(self):
            stdout, _ = run("/usr/local/bin/myapp --help", binary=False)
            assert "myapp [-abc]" in stdout
            assert "/usr/local/bin" not in stdout

    class run:
        class report:
            def prints_report_of_everything_given(self):
                expected = """Arguments:
  K: -a
  K: -b
  P: --name John Doe
  K: --verbose
"""
                expect("-ab --name John Doe --verbose", out=expected)

            def empty_argv_prints_bare_title(self):
                expect("", out="Arguments:\n")

            def stores_parse_result(self):
                p = Program()
                run("-a --b c", program=p)
                assert isinstance(p.store, ArgumentStore)
                assert p.store.get("b") == "c"

            def title_comes_from_config(self):
                os.environ["CLARGS_REPORT_TITLE"] = "Given:"
                expect("-a", out="Given:\n  K: -a\n")

            def may_sort_via_config(self):
                os.environ["CLARGS_REPORT_SORT"] = "1"
                expect("--zz -b", out="Arguments:\n  K: -b\n  K: --zz\n")

            def config_class_is_honored(self):
                class MyConfig(Config):
                    @staticmethod
                    def global_defaults():
                        defaults = Config.global_defaults()
                        defaults["report"]["title"] = "Mine:"
                        return defaults

                p = Program(config_class=MyConfig)
                expect("-a", out="Mine:\n  K: -a\n", program=p)

            def config_without_debug_key_still_reports(self):
                class MyConfig(Config):
                    @staticmethod
                    def global_defaults():
                        return {"report": {"title": "Bare:", "sort": False}}

                p = Program(config_class=MyConfig)
                expect("-a", out="Bare:\n  K: -a\n", program=p)

            def runtime_config_file_named_by_env(self):
                os.environ["CLARGS_CONFIG"] = join(configs, "runtime.yaml")
                expect("-b -a", out="Runtime:\n  K: -a\n  K: -b\n")

            def env_vars_win_over_runtime_config_file(self):
                os.environ["CLARGS_CONFIG"] = join(configs, "runtime.yaml")
                os.environ["CLARGS_REPORT_TITLE"] = "Env:"
                expect("-a", out="Env:\n  K: -a\n")

        class orphan_values:
            def print_error_to_stderr(self):
                stdout, stderr = run("loose --name value")
                assert stdout == ""
                assert "Can't parse a value without a key" in stderr
                assert "'loose'" in stderr

            @trap
            def exit_with_code_1(self):
                with raises(SystemExit) as info:
                    Program().run("clargs loose")
                assert info.value.code == 1

        class help_and_version:
            def help_prints_usage(self):
                stdout, _ = run("--help")
                assert stdout.startswith("Usage: clargs ")
                assert "-V, --version" in stdout

            def short_help_flag(self):
                stdout, _ = run("-h")
                assert stdout.startswith("Usage: clargs ")

            def help_may_be_bundled(self):
                stdout, _ = run("-vh")
                assert stdout.startswith("Usage: clargs ")

            def help_wins_over_version(self):
                stdout, _ = run("--version --help")
                assert stdout.startswith("Usage: ")

            def version_prints_name_and_version(self):
                p = Program(version="1.2.3")
                expect("--version", out="Clargs 1.2.3\n", program=p)

            def short_version_flag(self):
                p = Program(version="1.2.3")
                expect("-V", out="Clargs 1.2.3\n", program=p)

            @trap
            def exit_with_code_0(self):
                with raises(SystemExit) as info:
                    Program().run("clargs --version")
                assert info.value.code == 0

            def do_not_print_report(self):
                stdout, _ = run("-a --help")
                assert "Arguments:" not in stdout

        class debug:
            @patch("clargs.program.enable_logging")
            def enabled_by_config(self, enable_logging):
                os.environ["CLARGS_DEBUG"] = "1"
                run("-a")
                enable_logging.assert_called_once_with()

            @patch("clargs.program.enable_logging")
            def disabled_by_default(self, enable_logging):
                run("-a")
                assert not enable_logging.called

        def exit_false_swallows_Exit(self):
            p = Program()
            p.print_help = lambda: None
            p.run("clargs --help", exit=False)

        @patch.object(Program, "parse_argv", side_effect=KeyboardInterrupt)
        def KeyboardInterrupt_exits_1(self, parse_argv):
            with raises(SystemExit) as info:
                Program().run("clargs -a")
            assert info.value.code == 1

    class parse_cleanup:
        def raises_Exit_on_help(self):
            p = Program()
            p.store = ArgumentStore().add("help")
            p.argv = ["clargs"]
            p.print_help = lambda: None
            with raises(Exit):
                p.parse_cleanup()

        def does_nothing_otherwise(self):
            p = Program()
            p.store = ArgumentStore().add("a")
            p.parse_cleanup()


class main_:
    def program_is_named_clargs(self):
        assert main.program.name == "Clargs"
        assert main.program.binary == "clargs"

    def program_uses_package_version(self):
        from clargs import __version__

        assert main.program.version == __version__

    @trap
    def runs_as_entrypoint(self):
        main.program.run(["whatever", "-a"], exit=False)
        assert sys.stdout.getvalue() == "Arguments:\n  K: -a\n"
