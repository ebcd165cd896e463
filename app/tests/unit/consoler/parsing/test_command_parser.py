"""Unit tests for parse_command."""

from consoler import ParsedCommand
from consoler.parsing import parse_command


class TestParseCommand:
    """Test splitting templates and invocations into ParsedCommand."""

    def test_parse_template_string(self):
        """Patterns are kept verbatim."""
        parsed = parse_command("deploy <env> [region] --retries=<tries|type:number>")
        assert parsed == ParsedCommand(
            command="deploy",
            arguments=("<env>", "[region]"),
            options={"retries": "<tries|type:number>"},
        )

    def test_parse_invocation_tokens(self):
        """Token sequences are decomposed without tokenizing."""
        parsed = parse_command(["deploy", "prod", "--retries=5", "-v"])
        assert parsed.command == "deploy"
        assert parsed.arguments == ("prod",)
        assert parsed.options == {"retries": "5", "v": True}

    def test_quoted_argument(self):
        """A quoted argument stays one positional value."""
        parsed = parse_command('say "hello world"')
        assert parsed.arguments == ("hello world",)

    def test_flag_forms(self):
        """Bare and empty-valued flags keep their sentinels."""
        parsed = parse_command("command --opt= --flag --no-color")
        assert parsed.options == {"opt": "", "flag": True, "color": False}

    def test_no_command(self):
        """Without positional tokens the command is absent."""
        parsed = parse_command([])
        assert parsed.command is None
        assert parsed.arguments == ()
        assert parsed.options == {}
