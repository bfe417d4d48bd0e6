import unittest

from flight_finder.prices import build_price_pattern, scan_prices
from flight_finder.segmenter import (
    is_heading_marker,
    match_heading,
    normalise_whitespace,
    strip_preamble,
    to_lines,
)


class SegmenterTests(unittest.TestCase):
    def test_strip_preamble_returns_text_after_marker(self) -> None:
        raw = "Title: search\nMarkdown Content:\n\n  first line\nsecond  "

        self.assertEqual(strip_preamble(raw), "first line\nsecond")

    def test_strip_preamble_without_marker_is_lenient(self) -> None:
        raw = "  no marker here  "

        self.assertIs(strip_preamble(raw), raw)

    def test_to_lines_trims_and_drops_empty_lines(self) -> None:
        content = "  one \n\n\t\n two\r\nthree"

        self.assertEqual(to_lines(content), ["one", "two", "three"])

    def test_normalise_whitespace(self) -> None:
        self.assertEqual(normalise_whitespace("  Fly \n for\t£199  "), "Fly for £199")

    def test_match_heading(self) -> None:
        self.assertEqual(
            match_heading("[###  Cheap Flight ](https://example.com/a) trailing"),
            ("Cheap Flight", "https://example.com/a"),
        )
        self.assertIsNone(match_heading("[### Missing url]()"))
        self.assertIsNone(match_heading("text [### Not at start](https://example.com)"))

    def test_is_heading_marker(self) -> None:
        self.assertTrue(is_heading_marker("[### anything"))
        self.assertFalse(is_heading_marker("### anything"))


class PriceScannerTests(unittest.TestCase):
    def test_scan_finds_candidates_left_to_right(self) -> None:
        candidates = scan_prices("From €42.99, then £ 120 and $1500")

        self.assertEqual([item.symbol for item in candidates], ["€", "£", "$"])
        self.assertEqual([item.amount for item in candidates], [42.99, 120.0, 1500.0])
        self.assertEqual([item.raw for item in candidates], ["€42.99", "£ 120", "$1500"])

    def test_scan_without_matches_returns_empty_list(self) -> None:
        self.assertEqual(scan_prices("Flight TP1331 in 2024"), [])
        self.assertEqual(scan_prices(""), [])

    def test_amounts_longer_than_four_digits_are_cut(self) -> None:
        candidates = scan_prices("£25000")

        self.assertEqual(len(candidates), 1)
        self.assertEqual(candidates[0].amount, 2500.0)

    def test_only_one_space_is_allowed_after_symbol(self) -> None:
        self.assertEqual(scan_prices("£  99"), [])

    def test_custom_symbol_set(self) -> None:
        candidates = scan_prices("¥900 or £10", symbols=("¥",))

        self.assertEqual([item.raw for item in candidates], ["¥900"])

    def test_pattern_requires_symbols(self) -> None:
        with self.assertRaises(ValueError):
            build_price_pattern(())


if __name__ == "__main__":
    unittest.main()
