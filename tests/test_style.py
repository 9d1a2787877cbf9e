"""Tests for StyleSet merging."""

import unittest

from bbdoc.style import StyleSet, bold, color, italic, size


class StyleSetTest(unittest.TestCase):
    def test_constructors_set_one_attribute(self):
        self.assertEqual(color("red"), StyleSet(color="red"))
        self.assertEqual(size(10), StyleSet(size=10))
        self.assertEqual(bold(), StyleSet(bold=True))
        self.assertEqual(italic(), StyleSet(italic=True))

    def test_default_is_identity(self):
        styles = [
            StyleSet(),
            StyleSet(color="red", size=12, bold=True),
            StyleSet(italic=True),
        ]
        for s in styles:
            self.assertEqual(StyleSet().merge(s), s)
            self.assertEqual(s.merge(StyleSet()), s)

    def test_override_wins_for_color_and_size(self):
        merged = StyleSet(color="red", size=10).merge(StyleSet(color="blue"))
        self.assertEqual(merged.color, "blue")
        self.assertEqual(merged.size, 10)

    def test_flags_are_or_combined(self):
        merged = StyleSet(bold=True).merge(StyleSet(italic=True))
        self.assertTrue(merged.bold)
        self.assertTrue(merged.italic)
        self.assertTrue(StyleSet(bold=True).merge(StyleSet()).bold)

    def test_combine_rightmost_wins(self):
        combined = StyleSet.combine(color("red"), size(8), color("green"), bold())
        self.assertEqual(combined, StyleSet(color="green", size=8, bold=True))

    def test_combine_grouping_does_not_matter(self):
        a, b, c = color("red"), StyleSet(color="blue", bold=True), size(4)
        self.assertEqual(a.merge(b).merge(c), a.merge(b.merge(c)))

    def test_title_style(self):
        self.assertEqual(
            StyleSet.combine(size(120), bold(), italic()),
            StyleSet(size=120, bold=True, italic=True),
        )

    def test_negative_size_rejected(self):
        with self.assertRaises(ValueError):
            StyleSet(size=-1)

    def test_is_plain(self):
        self.assertTrue(StyleSet().is_plain)
        self.assertFalse(bold().is_plain)


if __name__ == "__main__":
    unittest.main()
