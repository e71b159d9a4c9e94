#!/usr/bin/env python3
"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Tests for the JSONC comment stripper in `hyperskin/jsonc.py`.
"""
import json
import tempfile
import unittest
from pathlib import Path
from textwrap import dedent

from hyperskin.jsonc import loads_jsonc, read_jsonc, strip_comments


class StripCommentsTests(unittest.TestCase):
    """Comment and trailing comma removal."""

    def test_block_and_line_comments_with_trailing_comma(self) -> None:
        source = '{"a": 1, /* keep */ "b": 2, // trailing\n}'
        stripped = strip_comments(source)
        self.assertEqual(stripped, '{"a": 1,  "b": 2 \n}')
        self.assertEqual(json.loads(stripped), {"a": 1, "b": 2})

    def test_comment_markers_inside_strings_are_kept(self) -> None:
        source = '{"url": "http://example.com // not a comment", "glob": "/* not either */"}'
        self.assertEqual(strip_comments(source), source)

    def test_escaped_quote_does_not_end_string(self) -> None:
        source = '{"a": "say \\"hi\\" // still inside", "b": "c:\\\\"} // gone'
        stripped = strip_comments(source)
        self.assertEqual(
            json.loads(stripped),
            {"a": 'say "hi" // still inside', "b": "c:\\"},
        )

    def test_clean_input_is_unchanged(self) -> None:
        source = '{\n    "a": [1, 2, 3],\n    "b": {"c": "d"}\n}'
        self.assertEqual(strip_comments(source), source)

    def test_stripping_is_idempotent(self) -> None:
        source = dedent(
            """
            {
                // leading
                "list": [1, 2, [3, ], ],
                "obj": {"x": "y", /* inline */ },
            }
            """
        )
        once = strip_comments(source)
        self.assertEqual(strip_comments(once), once)
        self.assertEqual(json.loads(once), {"list": [1, 2, [3]], "obj": {"x": "y"}})

    def test_commas_inside_strings_are_not_trailing(self) -> None:
        source = '{"a": ",]", "b": ", }"}'
        self.assertEqual(strip_comments(source), source)

    def test_unterminated_block_comment_consumes_rest(self) -> None:
        self.assertEqual(strip_comments('{"a": 1} /* never closed\n"b": 2'), '{"a": 1} ')

    def test_line_comment_keeps_newline(self) -> None:
        self.assertEqual(strip_comments('[1, // one\n2]'), '[1, \n2]')


class LoadsJsoncTests(unittest.TestCase):
    def test_loads_settings_like_document(self) -> None:
        source = dedent(
            """
            // generated by Windows Terminal
            {
                "$schema": "https://aka.ms/terminal-profiles-schema",
                "theme": "dark", // user choice
                "profiles": { "list": [ { "name": "pwsh", }, ], },
            }
            """
        )
        parsed = loads_jsonc(source)
        self.assertEqual(parsed["theme"], "dark")
        self.assertEqual(parsed["profiles"]["list"], [{"name": "pwsh"}])

    def test_malformed_input_raises(self) -> None:
        with self.assertRaises(json.JSONDecodeError):
            loads_jsonc('{"a": }')

    def test_read_jsonc_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "settings.json"
            path.write_text('{"a": 1, /* b */}', encoding="utf-8")
            self.assertEqual(read_jsonc(path), {"a": 1})


if __name__ == "__main__":
    unittest.main()
