import unittest

from range2masks import ALL_ONES, Entry, NotAPrefix, convert, select
from range2masks.render import (format_entry, format_rule_set,
                                format_selection, mask_to_prefix_len)


class TestPrefixLength(unittest.TestCase):
    def test_00_prefixes(self):
        self.assertEqual(32, mask_to_prefix_len(ALL_ONES))
        self.assertEqual(24, mask_to_prefix_len(0xFFFFFF00))
        self.assertEqual(1, mask_to_prefix_len(0x80000000))
        self.assertEqual(0, mask_to_prefix_len(0))

    def test_01_not_a_prefix(self):
        for mask in [0xFF00FF00, 0x00FFFFFF, 0xFFFFFFFD]:
            with self.subTest(mask=hex(mask)), self.assertRaises(NotAPrefix) as cm:
                mask_to_prefix_len(mask)
            self.assertEqual(mask, cm.exception.mask)


class TestFormat(unittest.TestCase):
    def test_00_entry(self):
        self.assertEqual("patt: 00000008  (8 - 9)\nmask: fffffffe",
                         format_entry(Entry(8, 0xFFFFFFFE)))

    def test_01_entry_ipv4(self):
        self.assertEqual("patt: 0a000000  (167772160 - 167772415)\nmask: ffffff00\n10.0.0.0/24",
                         format_entry(Entry(0x0A000000, 0xFFFFFF00), ipv4=True))

    def test_02_rule_set(self):
        lines = format_rule_set(convert(5, 10)).splitlines()
        self.assertEqual(8, len(lines))
        self.assertEqual("patt: 0000000a  (10 - 10)", lines[0])
        self.assertEqual("mask: ffffffff", lines[-1])

    def test_03_direct(self):
        self.assertEqual(format_rule_set(convert(100, 200)), format_selection(select(100, 200)))

    def test_04_split(self):
        self.assertEqual(
            "Reject: 0 - 0\n"
            "patt: 00000000  (0 - 0)\n"
            "mask: ffffffff\n"
            "Accept: 0 - 255\n"
            "patt: 00000000  (0 - 255)\n"
            "mask: ffffff00",
            format_selection(select(1, 255)))

    def test_05_split_ipv4(self):
        text = format_selection(select(0x0A000001, 0x0A0000FF), ipv4=True)
        lines = text.splitlines()
        self.assertEqual("Reject: 0 - 167772160", lines[0])
        self.assertEqual(["10.0.0.0/32", "8.0.0.0/7", "0.0.0.0/5", "10.0.0.0/24", "8.0.0.0/7", "0.0.0.0/5"],
                         [line for line in lines if "/" in line])
        self.assertIn("Accept: 0 - 167772415", lines)


if __name__ == '__main__':
    unittest.main()
