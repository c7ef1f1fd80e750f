import json
import os
import tempfile
import unittest

from pybreachvip.exceptions import ParseError
from pybreachvip.extractor import (
    Absent,
    Other,
    Text,
    TextList,
    decode_field_value,
    extract,
    extract_file,
)


class TestDecodeFieldValue(unittest.TestCase):
    def test_variants(self):
        record = {
            "text": "a@x.com",
            "list": ["a", 1, "b"],
            "number": 123,
            "null": None,
            "object": {"a": "b"},
            "flag": True,
        }

        self.assertEqual(decode_field_value(record, "missing"), Absent())
        self.assertEqual(decode_field_value(record, "text"), Text("a@x.com"))
        self.assertEqual(decode_field_value(record, "list"), TextList(["a", 1, "b"]))
        self.assertEqual(decode_field_value(record, "number"), Other(123))
        self.assertEqual(decode_field_value(record, "null"), Other(None))
        self.assertEqual(decode_field_value(record, "object"), Other({"a": "b"}))
        self.assertEqual(decode_field_value(record, "flag"), Other(True))

    def test_texts(self):
        self.assertEqual(Absent().texts(), [])
        self.assertEqual(Text("p1").texts(), ["p1"])
        self.assertEqual(TextList(["a", None, ["b"], "c", 2]).texts(), ["a", "c"])
        self.assertEqual(Other(1.5).texts(), [])


class TestExtract(unittest.TestCase):
    def test_scalar_and_list_values(self):
        body = json.dumps(
            {
                "results": [
                    {"email": "a@x.com", "password": "p1"},
                    {"email": ["b@x.com", "c@x.com"]},
                ]
            }
        ).encode("utf-8")

        results = extract(body)

        self.assertEqual(results.total, 2)
        self.assertEqual(results.emails, ["a@x.com", "b@x.com", "c@x.com"])
        self.assertEqual(results.passwords, ["p1"])

    def test_irregular_records_are_tolerated(self):
        body = b'{"results": [{"email": 123}, {"password": null}, "not-an-object"]}'

        results = extract(body)

        self.assertEqual(results.total, 3)
        self.assertEqual(results.emails, [])
        self.assertEqual(results.passwords, [])

    def test_non_text_list_items_are_skipped(self):
        body = b'{"results": [{"password": ["p1", 2, null, {"x": 1}, "p2"]}, [1], null]}'

        results = extract(body)

        self.assertEqual(results.total, 3)
        self.assertEqual(results.passwords, ["p1", "p2"])

    def test_duplicates_and_order_preserved(self):
        body = b'{"results": [{"email": "z@x.com"}, {"email": ["a@x.com", "z@x.com"]}]}'

        results = extract(body)

        self.assertEqual(results.emails, ["z@x.com", "a@x.com", "z@x.com"])

    def test_empty_results(self):
        results = extract(b'{"results": []}')

        self.assertEqual(results.total, 0)
        self.assertEqual(results.emails, [])
        self.assertEqual(results.passwords, [])

    def test_accepts_text_input(self):
        results = extract('{"results": [{"email": "a@x.com"}], "other": 1}')

        self.assertEqual(results.emails, ["a@x.com"])

    def test_missing_results_array(self):
        for body in (
            b'{"notresults": []}',
            b'{"results": {"email": "a@x.com"}}',
            b'{"results": null}',
            b"[]",
            b'"results"',
            b"null",
        ):
            with self.subTest(body=body):
                with self.assertRaises(ParseError) as context:
                    extract(body)
                self.assertEqual(
                    context.exception.kind, ParseError.MISSING_RESULTS_ARRAY
                )

    def test_malformed_json(self):
        for body in (b'{"results": [', b"", b"not json", b"\xff\xfe\x00garbage"):
            with self.subTest(body=body):
                with self.assertRaises(ParseError) as context:
                    extract(body)
                self.assertEqual(context.exception.kind, ParseError.MALFORMED_JSON)

    def test_non_finite_constants_are_malformed(self):
        for body in (
            b'{"results": [NaN, {"email": "a"}]}',
            b'{"results": [{"password": Infinity}]}',
            b'{"results": [], "score": -Infinity}',
        ):
            with self.subTest(body=body):
                with self.assertRaises(ParseError) as context:
                    extract(body)
                self.assertEqual(context.exception.kind, ParseError.MALFORMED_JSON)

    def test_deeply_nested_document_is_malformed(self):
        depth = 200000
        body = b'{"results": ' + b"[" * depth + b"]" * depth + b"}"

        with self.assertRaises(ParseError) as context:
            extract(body)

        self.assertEqual(context.exception.kind, ParseError.MALFORMED_JSON)

    def test_lone_surrogate_escape_is_kept(self):
        results = extract(b'{"results": [{"email": "\\ud800x@x.com"}]}')

        self.assertEqual(results.emails, ["\ud800x@x.com"])


class TestExtractFile(unittest.TestCase):
    def test_reads_saved_response(self):
        with tempfile.TemporaryDirectory() as directory:
            path = os.path.join(directory, "output.json")
            with open(path, "wb") as handle:
                handle.write(b'{"results": [{"email": "a@x.com", "password": ["p"]}]}')

            results = extract_file(path)

        self.assertEqual(results.total, 1)
        self.assertEqual(results.emails, ["a@x.com"])
        self.assertEqual(results.passwords, ["p"])

    def test_missing_file_raises_os_error(self):
        with tempfile.TemporaryDirectory() as directory:
            with self.assertRaises(OSError):
                extract_file(os.path.join(directory, "missing.json"))


if __name__ == "__main__":
    unittest.main()
