import unittest
from stringkit import InvalidArgument
from stringkit.padding import pad_left, pad_right

class TestPadLeft(unittest.TestCase):
    def test_pad_number(self):
        self.assertEqual(pad_left(5, 4, '0'), '0005')

    def test_partial_tile_from_fill_tail(self):
        self.assertEqual(pad_left('ab', 5, 'xy'), 'yxyab')
        self.assertEqual(pad_left('1', 6, 'abcd'), 'dabcd1')

    def test_no_truncation(self):
        self.assertEqual(pad_left('abcdef', 3, '0'), 'abcdef')

    def test_exact_length(self):
        self.assertEqual(pad_left('abc', 3, 'xy'), 'abc')

    def test_fill_longer_than_gap(self):
        self.assertEqual(pad_left('a', 3, 'wxyz'), 'yza')

    def test_result_length(self):
        for max_len in range(0, 12):
            with self.subTest(max_len=max_len):
                self.assertEqual(len(pad_left('abc', max_len, 'xyz')), max(max_len, 3))

    def test_empty_fill_raises(self):
        with self.assertRaises(InvalidArgument):
            pad_left('a', 3, '')
        with self.assertRaises(ValueError):
            pad_left('abc', 1, '')

class TestPadRight(unittest.TestCase):
    def test_pad_number(self):
        self.assertEqual(pad_right(5, 4, '0'), '5000')

    def test_partial_tile_from_fill_head(self):
        self.assertEqual(pad_right('ab', 5, 'xy'), 'abxyx')
        self.assertEqual(pad_right('1', 6, 'abcd'), '1abcda')

    def test_no_truncation(self):
        self.assertEqual(pad_right('abcdef', 3, '0'), 'abcdef')

    def test_negative_length(self):
        self.assertEqual(pad_right('abc', -1, 'xy'), 'abc')

    def test_empty_value(self):
        self.assertEqual(pad_right('', 4, 'ab'), 'abab')

    def test_empty_fill_raises(self):
        with self.assertRaises(InvalidArgument):
            pad_right('a', 3, '')
