"""Tests for the dotenv line codec."""

from shell_ai.store import codec


class TestRoundTrip:
    """parse/serialize never change content."""

    def test_preserves_blank_lines_and_trailing_newline(self):
        text = 'A="1"\n\nB="2"\n'
        assert codec.parse(text) == ['A="1"', "", 'B="2"', ""]
        assert codec.serialize(codec.parse(text)) == text

    def test_no_trimming(self):
        text = '  A="1"  \r\nB="2"'
        assert codec.serialize(codec.parse(text)) == text

    def test_empty_text(self):
        assert codec.parse("") == [""]
        assert codec.serialize([""]) == ""


class TestFindKeyLine:
    """Only an exact KEY= prefix matches."""

    def test_finds_key(self):
        lines = ['OPENAI_MODEL="gpt-4o"', 'OPENAI_KEY="sk-1"']
        assert codec.find_key_line(lines, "OPENAI_KEY") == 1

    def test_no_partial_match(self):
        lines = ['OPENAI_KEY_OLD="x"', 'XOPENAI_KEY="y"', 'OPENAI="z"']
        assert codec.find_key_line(lines, "OPENAI_KEY") is None
        assert codec.find_key_line(lines, "OPENAI_KE") is None

    def test_missing(self):
        assert codec.find_key_line([""], "OPENAI_KEY") is None


class TestFindFirstBlankLine:

    def test_first_blank(self):
        assert codec.find_first_blank_line(['A="1"', "", 'B="2"', ""]) == 1

    def test_whitespace_is_not_blank(self):
        assert codec.find_first_blank_line(['A="1"', " "]) is None


class TestEntries:

    def test_format_entry(self):
        assert codec.format_entry("OPENAI_KEY", "sk-1") == 'OPENAI_KEY="sk-1"'

    def test_parse_value_strips_quotes(self):
        assert codec.parse_value('OPENAI_KEY="sk-1"', "OPENAI_KEY") == "sk-1"
        assert codec.parse_value("OPENAI_KEY='sk-1'", "OPENAI_KEY") == "sk-1"
        assert codec.parse_value("OPENAI_KEY=sk-1", "OPENAI_KEY") == "sk-1"
        assert codec.parse_value('OPENAI_KEY=""', "OPENAI_KEY") == ""
