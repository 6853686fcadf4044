"""
Test cases for the string-literal writer.
"""

import unittest

from valuecodec import serialize_json_as_literal


class TestLiteralWriter(unittest.TestCase):
    """JSON output wrapped line by line in quoted literals."""

    def test_null(self):
        self.assertEqual(serialize_json_as_literal(None), '"null";')

    def test_list_of_strings(self):
        self.assertEqual(
            serialize_json_as_literal(["First item", "Second item"]),
            '"[\\n"\n'
            ' + "  \\"First item\\",\\n"\n'
            ' + "  \\"Second item\\"\\n"\n'
            ' + "]";',
        )

    def test_map(self):
        self.assertEqual(
            serialize_json_as_literal({"First item": "1", "Second item": "2"}),
            '"{\\n"\n'
            ' + "  \\"First item\\": \\"1\\",\\n"\n'
            ' + "  \\"Second item\\": \\"2\\"\\n"\n'
            ' + "}";',
        )

    def test_non_finite_floats(self):
        for value in (float("nan"), float("inf")):
            with self.subTest(value=value):
                self.assertEqual(
                    serialize_json_as_literal([value]),
                    '"[\\n"\n + "  null\\n"\n + "]";',
                )

    def test_nested_host_array(self):
        self.assertEqual(
            serialize_json_as_literal(["Hello", 12, (1, 2, 3)]),
            '"[\\n"\n'
            ' + "  \\"Hello\\",\\n"\n'
            ' + "  12,\\n"\n'
            ' + "  [\\n"\n'
            ' + "    1,\\n"\n'
            ' + "    2,\\n"\n'
            ' + "    3\\n"\n'
            ' + "  ]\\n"\n'
            ' + "]";',
        )

    def test_escaped_json_is_escaped_again(self):
        self.assertEqual(
            serialize_json_as_literal("a/b\n"),
            '"\\"a\\\\\\/b\\\\n\\"";',
        )

    def test_empty_list_keeps_blank_line(self):
        self.assertEqual(
            serialize_json_as_literal([]),
            '"[\\n"\n + "\\n"\n + "]";',
        )


if __name__ == "__main__":
    unittest.main()
