"""Tests for teamcity_reporter.escape."""

import pytest

from teamcity_reporter.escape import escape


@pytest.mark.parametrize(
    ("raw", "escaped"),
    [
        ("plain", "plain"),
        ("it's", "it|'s"),
        ("a|b", "a||b"),
        ("[x]", "|[x|]"),
        ("line1\nline2\r", "line1|nline2|r"),
        ("\u0085\u2028\u2029", "|x|l|p"),
        ("|'", "|||'"),
    ],
)
def test_escapes_service_message_characters(raw, escaped):
    assert escape(raw) == escaped


def test_none_becomes_empty():
    assert escape(None) == ""


def test_non_strings_are_stringified():
    assert escape(12) == "12"
