"""
Tests for the markup decoders – room names and digit glyphs.
"""

import unittest

from aiseg2.extract import parse_display_name, parse_segment_digits
from aiseg2.session import make_soup


def _select(html, class_name):
    return make_soup(html).find_all(class_=class_name)


class TestParseDisplayName(unittest.TestCase):
    def test_strips_br(self):
        els = _select('<div class="txt_name">Living<br>Room</div>', "txt_name")
        self.assertEqual(parse_display_name(els), "LivingRoom")

    def test_strips_br_case_insensitive(self):
        els = _select('<div class="txt_name">A<BR>B<Br/>C</div>', "txt_name")
        self.assertEqual(parse_display_name(els), "ABC")

    def test_plain_name_unchanged(self):
        els = _select('<div class="txt_name">Bedroom</div>', "txt_name")
        self.assertEqual(parse_display_name(els), "Bedroom")

    def test_empty_set(self):
        self.assertEqual(parse_display_name([]), "")

    def test_uses_first_element_only(self):
        html = '<div class="txt_name">First</div><div class="txt_name">Second</div>'
        self.assertEqual(parse_display_name(_select(html, "txt_name")), "First")


class TestParseSegmentDigits(unittest.TestCase):
    def test_digit_dot_digit(self):
        html = (
            '<div class="num_ond">'
            '<div class="num no3"></div><div class="num_dot"></div><div class="num no7"></div>'
            '</div>'
        )
        self.assertEqual(parse_segment_digits(_select(html, "num_ond")), "3.7")

    def test_multi_digit_reading(self):
        html = (
            '<div class="num_shitudo">'
            '<div class="num no5"></div><div class="num no8"></div>'
            '</div>'
        )
        self.assertEqual(parse_segment_digits(_select(html, "num_shitudo")), "58")

    def test_no_matching_classes(self):
        html = '<div class="num_ond"><div class="unit"></div><div class="blank"></div></div>'
        self.assertEqual(parse_segment_digits(_select(html, "num_ond")), "")

    def test_empty_set(self):
        self.assertEqual(parse_segment_digits([]), "")

    def test_dot_position_follows_document_order(self):
        html = (
            '<div class="num_ond">'
            '<div class="num_dot"></div><div class="num no0"></div><div class="num no9"></div>'
            '</div>'
        )
        self.assertEqual(parse_segment_digits(_select(html, "num_ond")), ".09")


if __name__ == "__main__":
    unittest.main()
