import unittest
from texpand.cursor import Cursor, read_argument, read_name
from texpand.interface import UnbalancedBraceError

class TestReadArgument(unittest.TestCase):

	def check(self, text, argument, rest):
		cursor = Cursor(text)
		self.assertEqual(argument, read_argument(cursor))
		self.assertEqual(rest, cursor.rest())

	def test_simple(self):
		self.check('{abc}rest', 'abc', 'rest')

	def test_empty(self):
		self.check('{}{next}', '', '{next}')

	def test_nested_braces_are_kept(self):
		self.check('{a{b}c}!', 'a{b}c', '!')
		self.check('{{{deep}}}', '{{deep}}', '')

	def test_escaped_braces_do_not_count(self):
		self.check(r'{a\}b}x', r'a\}b', 'x')
		self.check(r'{\{}x', r'\{', 'x')

	def test_escape_covers_exactly_one_character(self):
		# The first backslash escapes the second, so the brace that follows closes the argument.
		self.check(r'{a\\}b', r'a\\', 'b')

	def test_other_escapes_are_verbatim(self):
		self.check(r'{\def{X}{y}}', r'\def{X}{y}', '')

	def test_no_argument(self):
		for text in ['', 'abc', ' {a}', '\n{a}', '}']:
			with self.subTest(text=text):
				cursor = Cursor(text)
				self.assertIsNone(read_argument(cursor))
				self.assertEqual(0, cursor.right)

	def test_unbalanced(self):
		for text in ['{', '{a{b}', r'{a\}', '{a\\']:
			with self.subTest(text=text):
				with self.assertRaises(UnbalancedBraceError):
					read_argument(Cursor(text))

	def test_reading_consecutive_arguments(self):
		cursor = Cursor('{one}{two}{three} tail')
		self.assertEqual(['one', 'two', 'three'], [read_argument(cursor) for _ in range(3)])
		self.assertIsNone(read_argument(cursor))
		self.assertEqual(' tail', cursor.rest())


class TestReadName(unittest.TestCase):
	def test_alphanumeric_run(self):
		cursor = Cursor('abc12-x')
		self.assertEqual('abc12', read_name(cursor))
		self.assertEqual('-x', cursor.rest())

	def test_no_name(self):
		cursor = Cursor('{x}')
		self.assertEqual('', read_name(cursor))
		self.assertEqual(0, cursor.right)

	def test_stops_at_non_ascii(self):
		cursor = Cursor('naïve')
		self.assertEqual('na', read_name(cursor))


class TestCursor(unittest.TestCase):
	def test_item_span(self):
		cursor = Cursor('ab\\cd{x}')
		cursor.advance(2)
		cursor.begin()
		cursor.advance()
		read_name(cursor)
		self.assertEqual(slice(2, 5), cursor.slice())
		self.assertEqual('\\cd', cursor.text[cursor.slice()])

	def test_peek_past_the_end(self):
		cursor = Cursor('a')
		self.assertEqual('a', cursor.peek())
		self.assertIsNone(cursor.peek(1))
		cursor.advance(5)
		self.assertFalse(cursor.has_more())


if __name__ == '__main__':
	unittest.main()
