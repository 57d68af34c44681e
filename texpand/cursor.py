"""
A read position within a string, and the two little readers that move it along.

The expander never backtracks, so the cursor is a simpler beast than a
general scanner: there is no trailing context and no start-condition stack.
It does keep the notion of a "current item" (from `left` to `right`) because
that's precisely the span an error message wants to point at.
"""

from typing import Optional

from .interface import NAME_CHARS, UnbalancedBraceError

class Cursor:
	def __init__(self, text:str, at=0):
		self.__text = text
		self.__size = len(text)
		self.left = self.right = at

	@property
	def text(self): return self.__text

	def has_more(self):
		return self.right < self.__size

	def begin(self):
		""" Mark the start of a new item at the current position. """
		self.left = self.right

	def peek(self, offset=0) -> Optional[str]:
		""" The character `offset` places past the read position, or None past the end. """
		at = self.right + offset
		return self.__text[at] if at < self.__size else None

	def advance(self, nr_chars=1):
		self.right = min(self.right + nr_chars, self.__size)

	def rest(self) -> str:
		""" Everything not yet consumed. """
		return self.__text[self.right:]

	def slice(self):
		""" Return a slice-object corresponding to the extent of the current item. """
		return slice(self.left, self.right)

	def seek(self, position):
		""" Reading will next resume at the position given. """
		self.right = position


def read_name(cursor:Cursor) -> str:
	""" Consume and return the maximal run of ASCII alphanumerics (possibly empty). """
	start = cursor.right
	while cursor.peek() in NAME_CHARS:
		cursor.advance()
	return cursor.text[start:cursor.right]

def read_argument(cursor:Cursor) -> Optional[str]:
	"""
	Read one brace-delimited argument, e.g. "{stuff {nested} }rest" yields
	"stuff {nested} " with the cursor left at "rest".

	No whitespace is skipped: if the very next character is not an opening
	brace, there is no argument and the result is None (with the cursor unmoved).

	A backslash escapes exactly one following character. The pair is copied
	verbatim and has no effect on brace depth, so "\\}" does not close anything,
	while in "\\\\}" the brace does.
	"""
	if cursor.peek() != '{': return None
	text, start = cursor.text, cursor.right
	position, depth = start + 1, 1
	size = len(text)
	while position < size:
		c = text[position]
		if c == '\\': position += 2
		else:
			if c == '{': depth += 1
			elif c == '}':
				depth -= 1
				if depth == 0:
					cursor.seek(position + 1)
					return text[start+1:position]
			position += 1
	cursor.seek(size)
	raise UnbalancedBraceError("Unbalanced braces in argument")
