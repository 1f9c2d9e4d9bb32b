import unittest
from stringkit.formatting import format_string

class TestFormatString(unittest.TestCase):
    def test_format(self):
        self.assertEqual(format_string('{0} and {1}', 'x', 'y'), 'x and y')

    def test_missing_index_left_literal(self):
        self.assertEqual(format_string('{0} {2}', 'x', 'y'), 'x {2}')

    def test_no_args(self):
        self.assertEqual(format_string('{0}'), '{0}')

    def test_repeated_placeholder(self):
        self.assertEqual(format_string('{0}{0}{0}', 'ab'), 'ababab')

    def test_values_are_stringified(self):
        self.assertEqual(format_string('{0}/{1}/{2}', 1, 2.5, True), '1/2.5/True')
        self.assertEqual(format_string('[{0}]', ['a']), "[['a']]")

    def test_none_is_substituted(self):
        self.assertEqual(format_string('{0}', None), 'None')

    def test_substitutions_not_rescanned(self):
        self.assertEqual(format_string('{0} {1}', '{1}', 'y'), '{1} y')

    def test_leading_zero_index_left_literal(self):
        self.assertEqual(format_string('{01} {1}', 'x', 'y'), '{01} y')

    def test_multi_digit_index(self):
        args = [str(i) for i in range(12)]
        self.assertEqual(format_string('{10}-{11}', *args), '10-11')

    def test_non_numeric_braces_untouched(self):
        self.assertEqual(format_string('{name} {} {-1}', 'x'), '{name} {} {-1}')

    def test_empty_template(self):
        self.assertEqual(format_string('', 'x'), '')

    def test_huge_index_left_literal(self):
        template = '{' + '1' * 5000 + '}'
        self.assertEqual(format_string(template, 'x'), template)

    def test_index_longer_than_args_left_literal(self):
        self.assertEqual(format_string('{10}', 'a', 'b'), '{10}')

    def test_non_ascii_digits_left_literal(self):
        self.assertEqual(format_string('{٣}', 'a', 'b', 'c', 'd'), '{٣}')
