"""
Getting text in: reading documents and included files, with comments removed.

Comment rule:
	A % starts a comment, which runs to the end of the line, unless the character
	just before it is a backslash. The newline itself survives, but blanks (spaces
	and tabs) on either side of the comment do not: those trailing the text before
	the %, and those leading the next line.

Nothing else is interpreted here. Escapes are passed through untouched for the
expander to deal with. Only the single preceding character is consulted, so in
\\\\% the percent sign is kept as text just like in \\%.
"""

import sys

from .interface import MissingFileError

BLANKS = ' \t'

def strip_comments(text:str) -> str:
	out = []
	floor = 0 # Blanks below this mark follow a backslash and are not trimmed.
	position, size = 0, len(text)
	while position < size:
		c = text[position]
		escaped = position > 0 and text[position-1] == '\\'
		if c == '%' and not escaped:
			while len(out) > floor and out[-1] in BLANKS: out.pop()
			eol = text.find('\n', position)
			if eol < 0: break
			out.append('\n')
			position = eol + 1
			while position < size and text[position] in BLANKS: position += 1
			floor = len(out)
		else:
			out.append(c)
			position += 1
			if escaped: floor = len(out)
	return ''.join(out)

def read_file(path:str) -> str:
	""" The file-inclusion collaborator: comment-stripped contents of the file at `path`. """
	try:
		with open(path) as fh: return strip_comments(fh.read())
	except OSError as ex:
		raise MissingFileError(path) from ex

def read_sources(paths, stdin=None) -> str:
	"""
	Acquire a whole document. With no paths, read the default stream (standard
	input unless told otherwise). Otherwise read each file in turn, stripping
	comments per file, and concatenate.
	"""
	if not paths:
		return strip_comments((stdin or sys.stdin).read())
	return ''.join(read_file(path) for path in paths)
