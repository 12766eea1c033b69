import io

from rich.console import Console

from dotargs.parser import Argument, ArgumentRegistry

EXPECTED_HELP = """SmartRouter 1.0

Usage:
smartrouter [/h=OPTION, 192.168.1.1] [/host=OPTION, 192.168.1.1] </pu=OPTION> [/tag=COLLECTION] [/verbose, False]

h         Router address.
          Optional, Default value: 192.168.1.1

host      Alias for 'h'.
          Optional, Default value: 192.168.1.1

pu        PPPoE user.
          Required

tag       Tags to apply.
          Optional

verbose   Verbose output.
          Optional, Default value: False

Examples:

Default host
smartrouter pu alice

Other host
smartrouter /h:10.0.0.1 pu alice"""


def build_registry(console=None):
    registry = ArgumentRegistry(
        application_info="SmartRouter 1.0", executable_name="smartrouter", console=console
    )
    registry.register_argument("verbose", Argument.flag(help="Verbose output."))
    registry.register_argument("pu", Argument.option(required=True, help="PPPoE user."))
    registry.register_argument("h", Argument.option("192.168.1.1", help="Router address."))
    registry.register_argument("tag", Argument.collection(help="Tags to apply."))
    registry.register_alias("h", "host")
    registry.add_example("Other host", "smartrouter /h:10.0.0.1 pu alice")
    registry.add_example("Default host", "smartrouter pu alice")
    return registry


def test_format_help():
    assert build_registry().format_help() == EXPECTED_HELP


def test_format_help_with_error_message():
    help_text = build_registry().format_help("Missing value for option 'pu'")
    assert help_text.startswith(
        "SmartRouter 1.0\n\nMissing value for option 'pu'\n\nUsage:\n"
    )


def test_blank_error_message_is_skipped():
    assert build_registry().format_help("   ") == EXPECTED_HELP


def test_help_without_examples_or_arguments():
    registry = ArgumentRegistry(application_info="Empty", executable_name="empty")
    assert registry.format_help() == "Empty\n\nUsage:\nempty"


def test_long_names_are_not_truncated():
    registry = ArgumentRegistry(application_info="App", executable_name="app")
    registry.register_argument("very-long-name", Argument.flag(help="Help."))
    assert "very-long-nameHelp." in registry.format_help().splitlines()


def test_help_is_stable_across_parses():
    registry = build_registry()
    registry.validate(["--h=10.0.0.1", "--tag=a"])
    assert registry.format_help() == EXPECTED_HELP


def test_print_help_writes_plain_text_to_console():
    output = io.StringIO()
    console = Console(file=output, width=40, color_system=None)
    registry = build_registry(console=console)
    registry.print_help()
    assert output.getvalue().splitlines() == EXPECTED_HELP.splitlines()


def test_print_help_to_default_console(capsys):
    registry = build_registry()
    registry.print_help("bad input")
    out = capsys.readouterr().out
    assert "bad input" in out
    assert "</pu=OPTION>" in out
    assert "Examples:" in out
