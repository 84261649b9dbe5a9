"""
Pytest configuration and shared fixtures for rdjson tests.

Provides immutable test data fixtures so that pass, fail and round-trip
modules exercise the same documents.
"""

from dataclasses import dataclass
from typing import Any

import pytest

import rdjson


@dataclass(frozen=True)
class JsonTestCase:
    """
    One JSON document and what parsing it should produce.

    expected_failure names a ParseFailure subclass, or is None for input
    that must parse.
    """

    description: str
    input_data: str
    expected_failure: type[rdjson.ParseFailure] | None = None
    expected_output: Any = None
    skip_reason: str = ""


def nested_arrays(levels: int, inner: str = "") -> str:
    """Builds `levels` arrays nested inside each other."""
    return "[" * levels + inner + "]" * levels


def nested_objects(levels: int) -> str:
    """Builds `levels` objects nested through the key "k"."""
    return '{"k":' * (levels - 1) + "{}" + "}" * (levels - 1)


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must fail parsing, with the failure kind.

    These cases follow the json.org JSON_checker suite. A member followed
    by anything other than a separator or the closing bracket reports
    UnexpectedEndOfInput, which is why several structural mistakes below
    map to that kind.
    """
    token = rdjson.UnexpectedToken
    eoi = rdjson.UnexpectedEndOfInput
    fail_docs: list[tuple[str, type[rdjson.ParseFailure]]] = [
        # https://json.org/JSON_checker/test/fail1.json
        (
            '"A JSON payload should be an object or array, not a string."',
            token,
        ),
        # https://json.org/JSON_checker/test/fail2.json
        ('["Unclosed array"', eoi),
        # https://json.org/JSON_checker/test/fail3.json
        ('{unquoted_key: "keys must be quoted"}', token),
        # https://json.org/JSON_checker/test/fail4.json
        ('["extra comma",]', rdjson.TrailingComma),
        # https://json.org/JSON_checker/test/fail5.json
        ('["double extra comma",,]', token),
        # https://json.org/JSON_checker/test/fail6.json
        ('[   , "<-- missing value"]', token),
        # https://json.org/JSON_checker/test/fail7.json
        ('["Comma after the close"],', token),
        # https://json.org/JSON_checker/test/fail8.json
        ('["Extra close"]]', token),
        # https://json.org/JSON_checker/test/fail9.json
        ('{"Extra comma": true,}', rdjson.TrailingComma),
        # https://json.org/JSON_checker/test/fail10.json
        (
            '{"Extra value after close": true} "misplaced quoted value"',
            token,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        ('{"Illegal expression": 1 + 2}', eoi),
        # https://json.org/JSON_checker/test/fail12.json
        ('{"Illegal invocation": alert()}', token),
        # https://json.org/JSON_checker/test/fail13.json
        ('{"Numbers cannot have leading zeroes": 013}', rdjson.LeadingZero),
        # https://json.org/JSON_checker/test/fail14.json
        ('{"Numbers cannot be hex": 0x14}', eoi),
        # https://json.org/JSON_checker/test/fail15.json
        ('["Illegal backslash escape: \\x15"]', token),
        # https://json.org/JSON_checker/test/fail16.json
        ("[\\naked]", token),
        # https://json.org/JSON_checker/test/fail17.json
        ('["Illegal backslash escape: \\017"]', token),
        # https://json.org/JSON_checker/test/fail18.json - SKIPPED
        ('[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]', token),
        # https://json.org/JSON_checker/test/fail19.json
        ('{"Missing colon" null}', token),
        # https://json.org/JSON_checker/test/fail20.json
        ('{"Double colon":: null}', token),
        # https://json.org/JSON_checker/test/fail21.json
        ('{"Comma instead of colon", null}', token),
        # https://json.org/JSON_checker/test/fail22.json
        ('["Colon instead of comma": false]', eoi),
        # https://json.org/JSON_checker/test/fail23.json
        ('["Bad value", truth]', token),
        # https://json.org/JSON_checker/test/fail24.json
        ("['single quote']", token),
        # https://json.org/JSON_checker/test/fail25.json
        ('["\ttab\tcharacter\tin\tstring\t"]', token),
        # https://json.org/JSON_checker/test/fail26.json
        ('["tab\\   character\\   in\\  string\\  "]', token),
        # https://json.org/JSON_checker/test/fail27.json
        ('["line\nbreak"]', token),
        # https://json.org/JSON_checker/test/fail28.json
        ('["line\\\nbreak"]', token),
        # https://json.org/JSON_checker/test/fail29.json
        ("[0e]", token),
        # https://json.org/JSON_checker/test/fail30.json
        ("[0e+]", token),
        # https://json.org/JSON_checker/test/fail31.json
        ("[0e+-1]", token),
        # https://json.org/JSON_checker/test/fail32.json
        ('{"Comma instead if closing brace": true,', eoi),
        # https://json.org/JSON_checker/test/fail33.json
        ('["mismatch"}', eoi),
        # https://code.google.com/archive/p/simplejson/issues/3
        ('["A' + chr(0x1F) + 'Z control characters in string"]', token),
    ]

    # Cases that are skipped with reasons
    skips = {
        18: "19 levels of nesting are within the default limit of 20",
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            expected_failure=kind,
            skip_reason=skips.get(idx + 1, ""),
        )
        for idx, (doc, kind) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON strings that must parse successfully.

    Documents from the JSON_checker suite that every strict parser accepts.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data="""[
    "JSON Test Pattern pass1",
    {"object with 1 member":["array with 1 element"]},
    {},
    [],
    -42,
    true,
    false,
    null,
    {
        "integer": 1234567890,
        "real": -9876.543210,
        "e": 0.123456789e-12,
        "E": 1.234567890E+34,
        "":  23456789012E66,
        "zero": 0,
        "one": 1,
        "space": " ",
        "quote": "\\"",
        "backslash": "\\\\",
        "controls": "\\b\\f\\n\\r\\t",
        "slash": "/ & \\/",
        "alpha": "abcdefghijklmnopqrstuvwyz",
        "ALPHA": "ABCDEFGHIJKLMNOPQRSTUVWYZ",
        "digit": "0123456789",
        "0123456789": "digit",
        "special": "`1~!@#$%^&*()_+-={':[,]}|;.</>?",
        "hex": "\\u0123\\u4567\\u89AB\\uCDEF\\uabcd\\uef4A",
        "true": true,
        "false": false,
        "null": null,
        "array":[  ],
        "object":{  },
        "address": "50 St. James Street",
        "url": "https://www.JSON.org/",
        "comment": "// /* <!-- --",
        "# -- --> */": " ",
        " s p a c e d " :[1,2 , 3

,

4 , 5        ,          6           ,7        ],"compact":[1,2,3,4,5,6,7],
        "jsontext": "{\\"object with 1 member\\":[\\"array with 1 element\\"]}",
        "quotes": "&#34; \\u0022 %22 0x22 034 &#x22;",
        "\\/\\\\\\"\\uCAFE\\uBABE\\uAB98\\uFCDE\\ubcda\\uef4A\\b\\f\\n\\r\\t`1~!@#$%^&*()_+-=[]{}|;:',./<>?"
: "A key can be any string"
    },
    0.5 ,98.6
,
99.44
,

1066,
1e1,
0.1e1,
1e-1,
1e00,2e+00,2e-00
,"rosebud"]""",
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data='[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data='{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases wrapped in a one-element array.

    Each scalar kind plus empty and small containers, wrapped in arrays.
    """
    cases = [
        ("null value", "null", None),
        ("true boolean", "true", True),
        ("false boolean", "false", False),
        ("integer", "42", 42.0),
        ("negative integer", "-17", -17.0),
        ("float", "3.14", 3.14),
        ("exponent", "2.5E-3", 0.0025),
        ("zero", "0", 0.0),
        ("empty string", '""', ""),
        ("simple string", '"hello"', "hello"),
        ("empty array", "[]", []),
        ("empty object", "{}", {}),
        ("simple array", "[1, 2, 3]", [1.0, 2.0, 3.0]),
        ("simple object", '{"key": "value"}', {"key": "value"}),
    ]
    return [
        JsonTestCase(description, f"[{text}]", None, [expected])
        for description, text, expected in cases
    ]
