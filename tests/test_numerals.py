import unittest

from range2masks import InvalidEndpoint
from range2masks.numerals import is_ipv4, is_numeral, parse_endpoint


class TestNumerals(unittest.TestCase):
    def test_00_detect(self):
        for text in ["0", "100", "0x64", "0XfF", " 7 "]:
            with self.subTest(text=text):
                self.assertTrue(is_numeral(text))
                self.assertFalse(is_ipv4(text))
        for text in ["10.0.0.1", "255.255.255.255"]:
            with self.subTest(text=text):
                self.assertTrue(is_ipv4(text))
                self.assertFalse(is_numeral(text))
        for text in ["", "abc", "0x", "-1", "1.2.3", "10.0.0.1/8", "1e3"]:
            with self.subTest(text=text):
                self.assertFalse(is_numeral(text))
                self.assertFalse(is_ipv4(text))

    def test_01_parse(self):
        self.assertEqual((100, False), parse_endpoint("100"))
        self.assertEqual((100, False), parse_endpoint("0x64"))
        self.assertEqual((255, False), parse_endpoint("0XFF"))
        self.assertEqual((8, False), parse_endpoint("008"))
        self.assertEqual((0xFFFFFFFF, False), parse_endpoint("4294967295"))
        self.assertEqual((0x0A000001, True), parse_endpoint("10.0.0.1"))
        self.assertEqual((0xFFFFFFFF, True), parse_endpoint("255.255.255.255"))

    def test_02_reject(self):
        for text in ["abc", "4294967296", "0x100000000", "256.0.0.1", "1.2.3", "-5"]:
            with self.subTest(text=text), self.assertRaises(InvalidEndpoint):
                parse_endpoint(text)

    def test_03_is_value_error(self):
        with self.assertRaises(ValueError):
            parse_endpoint("nope")


if __name__ == '__main__':
    unittest.main()
