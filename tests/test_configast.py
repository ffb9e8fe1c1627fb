import pytest
#
from inireader.configast import (classify, parse, parse_entry_line, unquote, names_equal,
                                 Entry, SectionHeader, Candidate, BLANK, COMMENT)
from inireader.settings import LookupSettings


@pytest.mark.parametrize("line", ["", "   ", "\t \t"])
def test_blank_lines(line):
    assert classify(line) is BLANK


@pytest.mark.parametrize("line", ["; comment", "   ;k=v", "# comment", "\t#[section]"])
def test_comment_lines(line):
    assert classify(line) is COMMENT


def test_hash_is_not_a_comment_without_marker():
    assert classify("#k=v", comment_markers=(';',)) == Candidate("#k=v")


def test_section_header():
    assert classify("[CLIENT]") == SectionHeader("CLIENT")
    assert classify("  [  my section\t]  ") == SectionHeader("my section")
    assert classify("[x]") == SectionHeader("x")


@pytest.mark.parametrize("line", ["[]", "[abc", "abc]", "x[abc]"])
def test_not_a_header(line):
    assert isinstance(classify(line), Candidate)


def test_candidate_is_trimmed():
    assert classify("  key = value\t") == Candidate("key = value")


def test_newline_is_not_trimmed():
    assert classify("[S]\n") == Candidate("[S]\n")


def test_parse_skips_blank_and_comments():
    text = """
    ; comment
    [S]
    # other comment
    k = v
    """
    assert list(parse(text)) == [SectionHeader("S"), Candidate("k = v")]


def test_parse_is_lazy():

    def lines():
        yield "[S]"
        raise AssertionError("read too far")

    assert next(parse(lines())) == SectionHeader("S")


def test_entry_line():
    assert parse_entry_line("key = value") == Entry("key", "value")
    assert parse_entry_line("key=a=b") == Entry("key", "a=b")
    assert parse_entry_line("key\t=\t value with spaces ") == Entry("key", "value with spaces")


@pytest.mark.parametrize("line", ["no separator", "=value", "  = value"])
def test_not_an_entry(line):
    assert parse_entry_line(line) is None


def test_empty_value():
    assert parse_entry_line("key =") == Entry("key", "")
    strict = LookupSettings(allow_empty_value=False)
    assert parse_entry_line("key =", strict) is None
    assert parse_entry_line('key = ""', strict) == Entry("key", "")


@pytest.mark.parametrize("value, expected", [
    ('"value with spaces"', 'value with spaces'),
    ('bareword', 'bareword'),
    ('"unterminated', '"unterminated'),
    ('"', '"'),
    ('""', ''),
    ('""quoted""', '"quoted"'),
    ("'single'", "'single'"),
])
def test_unquote(value, expected):
    assert unquote(value) == expected


def test_entry_value_is_unquoted():
    assert parse_entry_line('email = "somebody@domain.com"') == Entry("email", "somebody@domain.com")


def test_names_equal():
    assert names_equal("Client", "CLIENT")
    assert names_equal("phone", "PHONE")
    assert not names_equal("phone", "phones")
    assert not names_equal("fax", "tax")


def test_names_equal_only_folds_ascii():
    assert not names_equal("STRASSE", "straße")
    assert not names_equal("É", "é")
