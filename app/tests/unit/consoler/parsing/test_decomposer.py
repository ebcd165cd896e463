"""Unit tests for flag decomposition."""

from consoler.parsing import decompose


class TestLongFlags:
    """Test --name forms."""

    def test_long_flag_with_value(self):
        """--name=value keeps the raw string."""
        result = decompose(["--retries=3"])
        assert result.flags == {"retries": "3"}
        assert result.positional == []

    def test_long_flag_with_empty_value(self):
        """--name= yields an empty string."""
        assert decompose(["--name="]).flags == {"name": ""}

    def test_long_flag_value_keeps_equals(self):
        """Only the first = separates name and value."""
        assert decompose(["--expr=a=b"]).flags == {"expr": "a=b"}

    def test_bare_long_flag(self):
        """--name alone is True."""
        assert decompose(["--force"]).flags == {"force": True}

    def test_bare_long_flag_before_another_flag(self):
        """--name followed by a flag stays boolean."""
        assert decompose(["--force", "--dry"]).flags == {"force": True, "dry": True}

    def test_long_flag_consumes_next_value(self):
        """--name value takes the following word."""
        result = decompose(["--env", "prod", "extra"])
        assert result.flags == {"env": "prod"}
        assert result.positional == ["extra"]

    def test_long_flag_boolean_word(self):
        """--name false takes a boolean."""
        assert decompose(["--cache", "false"]).flags == {"cache": False}

    def test_negated_long_flag(self):
        """--no-name is False."""
        assert decompose(["--no-color"]).flags == {"color": False}

    def test_placeholder_value_kept_verbatim(self):
        """Template placeholders are not interpreted."""
        result = decompose(["--retries=<tries|type:number|default:3>"])
        assert result.flags == {"retries": "<tries|type:number|default:3>"}

    def test_repeated_flag_last_wins(self):
        """A repeated flag keeps its last value."""
        assert decompose(["--a=1", "--a=2"]).flags == {"a": "2"}


class TestShortFlags:
    """Test -x forms."""

    def test_short_flag_with_next_value(self):
        """-x value takes the following word."""
        result = decompose(["-o", "name"])
        assert result.flags == {"o": "name"}
        assert result.positional == []

    def test_short_flag_value_in_same_token(self):
        """A single '-o name' token assigns the remainder."""
        assert decompose(["-o name"]).flags == {"o": " name"}

    def test_short_cluster(self):
        """-abc sets every letter."""
        assert decompose(["-abc"]).flags == {"a": True, "b": True, "c": True}

    def test_short_cluster_last_letter_takes_value(self):
        """The last letter of a cluster may take the next word."""
        assert decompose(["-vo", "out.txt"]).flags == {"v": True, "o": "out.txt"}

    def test_short_numeric_value(self):
        """-n5 assigns the numeric remainder."""
        assert decompose(["-n5"]).flags == {"n": "5"}

    def test_short_equals_value(self):
        """-o=x assigns after the equals sign."""
        assert decompose(["-o=x"]).flags == {"o": "x"}

    def test_bare_short_flag(self):
        """-v alone is True."""
        assert decompose(["-v"]).flags == {"v": True}


class TestPositional:
    """Test positional values and separators."""

    def test_positional_order_preserved(self):
        """Positional values keep their order."""
        result = decompose(["deploy", "prod", "eu"])
        assert result.positional == ["deploy", "prod", "eu"]
        assert result.flags == {}

    def test_double_dash_ends_flags(self):
        """Everything after -- is positional."""
        result = decompose(["run", "--", "--not-a-flag", "-x"])
        assert result.positional == ["run", "--not-a-flag", "-x"]
        assert result.flags == {}

    def test_lone_dash_is_positional(self):
        """A single - is a value."""
        assert decompose(["cat", "-"]).positional == ["cat", "-"]

    def test_empty_tokens(self):
        """No tokens yield nothing."""
        result = decompose([])
        assert result.positional == []
        assert result.flags == {}
