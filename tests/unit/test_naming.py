"""Unit tests for WSDL name conversion helpers."""

import pytest

from adsapi.utils.naming import camel_case, fix_case_up, safe_identifier, snake_case


@pytest.mark.parametrize(
    "name,expected",
    [
        ("startIndex", "start_index"),
        ("totalNumEntries", "total_num_entries"),
        ("id", "id"),
        ("ApiError", "Api_error"),
        ("v201609Value", "v201609_value"),
    ],
)
def test_snake_case(name, expected):
    """Lowercase/digit followed by a capital starts a new word."""
    assert snake_case(name) == expected


@pytest.mark.parametrize(
    "name,expected",
    [
        ("start_index", "startIndex"),
        ("total_num_entries", "totalNumEntries"),
        ("operator", "operator"),
        ("startIndex", "startIndex"),
    ],
)
def test_camel_case(name, expected):
    assert camel_case(name) == expected


def test_camel_case_reverses_snake_case():
    """Property names survive the round trip used by the marshaller."""
    for name in ("microAmount", "serviceSelector", "positiveGeoTargetType"):
        assert camel_case(snake_case(name)) == name


def test_fix_case_up():
    assert fix_case_up("mutate") == "Mutate"
    assert fix_case_up("getResponse") == "GetResponse"
    assert fix_case_up("") == ""


def test_safe_identifier_handles_keywords_and_dots():
    """Parameters must be valid Python identifiers."""
    assert safe_identifier("serviceSelector") == "service_selector"
    assert safe_identifier("Operation.Type") == "Operation_Type"
    assert safe_identifier("lambda") == "lambda_"
    assert safe_identifier("from") == "from_"
