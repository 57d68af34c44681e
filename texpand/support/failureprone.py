"""
This module is all about easing over the process to display where things go wrong.

If you can localize where an error came from, you'd generally like to include some
context in the report. The usual strategy is to show the offending line, ideally
with a specific portion highlighted somehow. On a text console the `illustration`
function helps: Given a single line of text and a few parameters, it makes a
suitable picture.

Positions inside the expander are plain integer offsets into whatever string a
particular frame happened to be expanding. The SourceText converts those to
line and column numbers, and slices out the corresponding line.

Macro expansion adds one wrinkle: the text in which an error occurs is frequently
not the text of any file. It may be the body of a macro after substitution, or the
selected branch of a conditional. So an Issue carries a list of excerpts, innermost
first, each from whichever text was being expanded at that level. That reads rather
like a traceback, which is about what you want.

Line breaks follow the Unix, Apple, and DOS conventions.
"""

import bisect, re, sys
from typing import NamedTuple
from enum import Enum

LINE_BREAK = re.compile(r'\r\n?|\n')

MAX_EXCERPTS = 4 # Deep recursion makes for long trails; nobody reads past the first few.

class Severity(Enum):
	ERROR = "Error"

class Evidence(NamedTuple):
	slice:slice
	caption: str = "here"

	def width(self): return self.slice.stop - self.slice.start

class Issue(NamedTuple):
	"""
	Contain all the information necessary to present one problem.

	phase: tells what portion of the process found the issue.
	severity: tells how bad the issue is.
	description: explains the issue in plain language.
	evidence: a list of (SourceText, Evidence) pairs, most specific first.
	"""
	phase: str
	severity: Severity
	description: str
	evidence: list

	def as_text(self):
		"""
		This will generate a not-completely-terrible error report in text-only format.
		You should be able to print this on stderr and not cry yourself to sleep.
		"""
		lines = ["%s while %s: %s"%(self.severity.value, self.phase, self.description)]
		for source, e in self.evidence[:MAX_EXCERPTS]:
			if source.filename:
				lines.append("Excerpt from "+source.filename+" :")
			row, col = source.find_row_col(e.slice.start)
			single_line = source.line_of_text(row)
			lines.append(illustration(single_line, col, e.width(), prefix='% 6d :'%row, caption=e.caption))
		hidden = len(self.evidence) - MAX_EXCERPTS
		if hidden > 0:
			lines.append("... and %d more level(s) of expansion."%hidden)
		return "\n".join(lines)

	def emit(self, stream=None):
		""" Print the generated error text, by default to standard error. """
		print(self.as_text(), file=stream or sys.stderr)

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Builds up a picture of where something appears in a line of text. Useful for polite error messages. """
	single_line = single_line.rstrip('\r\n')
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline_width = max(1, min(width, len(single_line)-start))
	underline = '^'*underline_width
	return prefix + single_line.rstrip() + '\n' + blanks + underline +" "+caption

class SourceText:
	""" Wrapper for (a section of) source text: participates in half-respectable error-display with context. """
	def __init__(self, content:str, filename:str=None):
		self.content = content
		self.filename = filename
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily only find line breaks if it turns out to be necessary for a particular text. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]

	def find_row_col(self, index:int):
		""" Based on a character index offset from the start of text. Rows count from one. """
		self.__make_bounds()
		row = bisect.bisect_right(self.__bounds, index, hi=len(self.__bounds) - 1) - 1
		col = index - self.__bounds[row]
		return row+1, col

	def line_of_text(self, row):
		""" Rows count from one, as find_row_col reports them. """
		self.__make_bounds()
		r = max(0, row - 1)
		return self.content[self.__bounds[r]:self.__bounds[r + 1]]
