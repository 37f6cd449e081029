"""
Pytest configuration and shared fixtures for rdjson tests.

Provides immutable test data fixtures built from the json.org JSON_checker
suite, expressed as raw byte buffers.
"""

from dataclasses import dataclass
from typing import Any

import pytest

from rdjson import Array
from rdjson import Boolean
from rdjson import ErrorKind
from rdjson import Null
from rdjson import Number
from rdjson import Object
from rdjson import String

# https://json.org/JSON_checker/test/pass1.json
PASS1 = b"""[
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
,"rosebud"]"""


@dataclass(frozen=True)
class JsonTestCase:
    """
    Immutable container for JSON test case data.

    Holds test input and expected behavior for consistent test execution.
    """

    description: str
    input_data: bytes
    should_fail: bool = False
    expected_output: Any = None
    skip_reason: str = ""
    expected_kind: ErrorKind | None = None


@pytest.fixture
def json_fail_cases() -> list[JsonTestCase]:
    """
    Provides JSON documents that must fail parsing, with the error kind each
    one must report.

    These cases come from the json.org JSON_checker suite plus one control
    character case reported against simplejson.
    """
    fail_docs = [
        # https://json.org/JSON_checker/test/fail1.json
        (b'"A JSON payload should be an object or array, not a string."', None),
        # https://json.org/JSON_checker/test/fail2.json
        (b'["Unclosed array"', ErrorKind.UNEXPECTED_END),
        # https://json.org/JSON_checker/test/fail3.json
        (b'{unquoted_key: "keys must be quoted"}', ErrorKind.EXPECTED_STRING),
        # https://json.org/JSON_checker/test/fail4.json
        (b'["extra comma",]', ErrorKind.TRAILING_COMMA),
        # https://json.org/JSON_checker/test/fail5.json
        (b'["double extra comma",,]', ErrorKind.UNEXPECTED_TOKEN),
        # https://json.org/JSON_checker/test/fail6.json
        (b'[   , "<-- missing value"]', ErrorKind.UNEXPECTED_TOKEN),
        # https://json.org/JSON_checker/test/fail7.json
        (b'["Comma after the close"],', ErrorKind.TRAILING_CONTENT),
        # https://json.org/JSON_checker/test/fail8.json
        (b'["Extra close"]]', ErrorKind.TRAILING_CONTENT),
        # https://json.org/JSON_checker/test/fail9.json
        (b'{"Extra comma": true,}', ErrorKind.TRAILING_COMMA),
        # https://json.org/JSON_checker/test/fail10.json
        (
            b'{"Extra value after close": true} "misplaced quoted value"',
            ErrorKind.TRAILING_CONTENT,
        ),
        # https://json.org/JSON_checker/test/fail11.json
        (
            b'{"Illegal expression": 1 + 2}',
            ErrorKind.EXPECTED_COMMA_OR_BRACE,
        ),
        # https://json.org/JSON_checker/test/fail12.json
        (b'{"Illegal invocation": alert()}', ErrorKind.INVALID_LITERAL),
        # https://json.org/JSON_checker/test/fail13.json
        (
            b'{"Numbers cannot have leading zeroes": 013}',
            ErrorKind.INVALID_NUMBER,
        ),
        # https://json.org/JSON_checker/test/fail14.json
        (
            b'{"Numbers cannot be hex": 0x14}',
            ErrorKind.EXPECTED_COMMA_OR_BRACE,
        ),
        # https://json.org/JSON_checker/test/fail15.json
        (b'["Illegal backslash escape: \\x15"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail16.json
        (b"[\\naked]", ErrorKind.UNEXPECTED_TOKEN),
        # https://json.org/JSON_checker/test/fail17.json
        (b'["Illegal backslash escape: \\017"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail18.json - SKIPPED (deep nesting allowed)
        (b'[[[[[[[[[[[[[[[[[[[["Too deep"]]]]]]]]]]]]]]]]]]]]', None),
        # https://json.org/JSON_checker/test/fail19.json
        (b'{"Missing colon" null}', ErrorKind.EXPECTED_COLON),
        # https://json.org/JSON_checker/test/fail20.json
        (b'{"Double colon":: null}', ErrorKind.UNEXPECTED_TOKEN),
        # https://json.org/JSON_checker/test/fail21.json
        (b'{"Comma instead of colon", null}', ErrorKind.EXPECTED_COLON),
        # https://json.org/JSON_checker/test/fail22.json
        (
            b'["Colon instead of comma": false]',
            ErrorKind.EXPECTED_COMMA_OR_BRACKET,
        ),
        # https://json.org/JSON_checker/test/fail23.json
        (b'["Bad value", truth]', ErrorKind.EXPECTED_COMMA_OR_BRACKET),
        # https://json.org/JSON_checker/test/fail24.json
        (b"['single quote']", ErrorKind.UNEXPECTED_TOKEN),
        # https://json.org/JSON_checker/test/fail25.json
        (
            b'["\ttab\tcharacter\tin\tstring\t"]',
            ErrorKind.INVALID_CONTROL_CHARACTER,
        ),
        # https://json.org/JSON_checker/test/fail26.json
        (
            b'["tab\\   character\\   in\\  string\\  "]',
            ErrorKind.INVALID_ESCAPE,
        ),
        # https://json.org/JSON_checker/test/fail27.json
        (b'["line\nbreak"]', ErrorKind.INVALID_CONTROL_CHARACTER),
        # https://json.org/JSON_checker/test/fail28.json
        (b'["line\\\nbreak"]', ErrorKind.INVALID_ESCAPE),
        # https://json.org/JSON_checker/test/fail29.json
        (b"[0e]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail30.json
        (b"[0e+]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail31.json
        (b"[0e+-1]", ErrorKind.INVALID_NUMBER),
        # https://json.org/JSON_checker/test/fail32.json
        (
            b'{"Comma instead if closing brace": true,',
            ErrorKind.UNEXPECTED_END,
        ),
        # https://json.org/JSON_checker/test/fail33.json
        (b'["mismatch"}', ErrorKind.EXPECTED_COMMA_OR_BRACKET),
        # https://code.google.com/archive/p/simplejson/issues/3
        (
            b'["A\x1fZ control characters in string"]',
            ErrorKind.INVALID_CONTROL_CHARACTER,
        ),
    ]

    # Cases that are skipped with reasons
    skips = {
        1: "any value may be the root of a document",
        18: "twenty levels are well within the default nesting limit",
    }

    return [
        JsonTestCase(
            description=f"fail{idx + 1}.json",
            input_data=doc,
            should_fail=True,
            skip_reason=skips.get(idx + 1, ""),
            expected_kind=kind,
        )
        for idx, (doc, kind) in enumerate(fail_docs)
    ]


@pytest.fixture
def json_pass_cases() -> list[JsonTestCase]:
    """
    Provides JSON documents that must parse successfully.

    These test cases validate standards compliance for valid JSON structures.
    """
    return [
        JsonTestCase(
            description="pass1.json - complex nested structure",
            input_data=PASS1,
        ),
        JsonTestCase(
            description="pass2.json - deep nesting",
            input_data=b'[[[[[[[[[[[[[[[[[[["Not too deep"]]]]]]]]]]]]]]]]]]]',
        ),
        JsonTestCase(
            description="pass3.json - simple object",
            input_data=b'{"JSON Test Pattern pass3": {"The outermost value": "must be an object or array.", "In this test": "It is an object."}}',
        ),
    ]


@pytest.fixture
def basic_json_values() -> list[JsonTestCase]:
    """
    Provides basic JSON value test cases for fundamental parsing.

    Covers every value variant, each expressed as the tree it must produce.
    """
    return [
        JsonTestCase("null value", b"null", False, Null()),
        JsonTestCase("true boolean", b"true", False, Boolean(True)),
        JsonTestCase("false boolean", b"false", False, Boolean(False)),
        JsonTestCase("integer", b"42", False, Number(42)),
        JsonTestCase("negative integer", b"-17", False, Number(-17)),
        JsonTestCase("float", b"3.14", False, Number(3.14)),
        JsonTestCase("empty string", b'""', False, String("")),
        JsonTestCase("simple string", b'"hello"', False, String("hello")),
        JsonTestCase("empty array", b"[]", False, Array([])),
        JsonTestCase("empty object", b"{}", False, Object({})),
        JsonTestCase(
            "simple array",
            b"[1, 2, 3]",
            False,
            Array([Number(1), Number(2), Number(3)]),
        ),
        JsonTestCase(
            "simple object",
            b'{"key": "value"}',
            False,
            Object({"key": String("value")}),
        ),
    ]
