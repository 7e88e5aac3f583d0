import unittest

from gamedata.exceptions import ArgumentException, FormatException
from gamedata.utils.custom_bet_encoding import decode, encode


class TestCustomBetEncode(unittest.TestCase):

    def test_empty_and_none_encode_to_empty_string(self):
        self.assertEqual(encode({}), "")
        self.assertEqual(encode(None), "")

    def test_keys_are_sorted_ordinally(self):
        self.assertEqual(encode({"b": 2, "a": 1}), "{a:1,b:2}")
        # Uppercase sorts before lowercase in ordinal order.
        self.assertEqual(encode({"a": 1, "B": 2}), "{B:2,a:1}")

    def test_negative_values(self):
        self.assertEqual(encode({"x": -3}), "{x:-3}")

    def test_delimiter_in_key_is_rejected(self):
        with self.assertRaises(FormatException):
            encode({"a,b": 1})
        with self.assertRaises(FormatException):
            encode({"a:b": 1})


class TestCustomBetDecode(unittest.TestCase):

    def test_empty_and_none_decode_to_empty_dict(self):
        self.assertEqual(decode(""), {})
        self.assertEqual(decode(None), {})

    def test_decode_pairs(self):
        self.assertEqual(decode("{a:1,b:2}"), {"a": 1, "b": 2})

    def test_decode_tolerates_whitespace_around_values(self):
        self.assertEqual(decode("{a: 7 }"), {"a": 7})

    def test_missing_braces_is_a_format_error(self):
        for text in ("a:1", "{a:1", "a:1}"):
            with self.subTest(text=text):
                with self.assertRaises(FormatException):
                    decode(text)

    def test_pair_without_separator_is_an_argument_error(self):
        with self.assertRaises(ArgumentException):
            decode("{a}")

    def test_pair_with_two_separators_is_an_argument_error(self):
        with self.assertRaises(ArgumentException):
            decode("{a:1:2}")

    def test_empty_braces_is_an_argument_error(self):
        with self.assertRaises(ArgumentException):
            decode("{}")

    def test_non_integer_value_is_a_format_error(self):
        with self.assertRaises(FormatException):
            decode("{a:x}")
        with self.assertRaises(FormatException):
            decode("{a:1.5}")

    def test_value_outside_64_bit_range_is_a_format_error(self):
        self.assertEqual(decode("{a:9223372036854775807,b:-9223372036854775808}"), {"a": 2 ** 63 - 1, "b": -2 ** 63})
        for text in ("{a:9223372036854775808}", "{a:-9223372036854775809}", "{a:99999999999999999999999}"):
            with self.subTest(text=text):
                with self.assertRaises(FormatException):
                    decode(text)

    def test_duplicate_key_is_an_argument_error(self):
        with self.assertRaises(ArgumentException):
            decode("{a:1,a:2}")

    def test_numeric_keys_sort_lexicographically(self):
        self.assertEqual(encode({"2": 2, "0": 0, "1": 1}), "{0:0,1:1,2:2}")

    def test_malformed_wrappers(self):
        for text in (",", "{", "}", "{1:1", "1:1}"):
            with self.subTest(text=text):
                with self.assertRaises(FormatException):
                    decode(text)
        for text in ("{,}", "{1:1,}"):
            with self.subTest(text=text):
                with self.assertRaises(ArgumentException):
                    decode(text)
        with self.assertRaises(ArgumentException):
            decode("{0:0,0:1}")
        with self.assertRaises(FormatException):
            decode("{key:value}")

    def test_decode_inverts_encode(self):
        data = {"free": 2, "bonus": 1, "Z": -4}
        self.assertEqual(decode(encode(data)), data)


if __name__ == '__main__':
    unittest.main()
