"""
The expansion engine: a depth-first walk over text, rewriting directives as it goes.

At each position the cursor sees one of four things:

1. an ordinary character, which goes straight to the sink;
2. a backslash and one of the five special characters, which yields the special alone;
3. a backslash and a run of letters and digits, which is a directive: either one
   of the builtins or an invocation of a user macro;
4. a backslash and anything else (or nothing), which passes through verbatim.

Directives produce text of their own (a selected branch, a substituted macro
body). That text is expanded by a nested call, and then the current call simply
carries on with whatever follows the directive. So nesting depth tracks how
deeply directives are nested in the document, not how many of them there are.

Inclusion is the exception: the file is spliced into the document, so its text
and the remainder after the directive go through one nested call together, and
the current call has nothing left to do. Either way, the remainder of any text
is only ever processed once.

Nothing here knows about files or standard streams. Inclusion goes through the
`reader` callable, output goes through an `OutputSink`, and the macro table is
handed in by whoever wants to look at it afterward.
"""

import sys
from typing import Callable, Optional

from .interface import SPECIALS, NAME_CHARS, BUILTINS, Builtin, ExpansionError, check_name
from .interface import ArityError, UndefinedMacroError, MissingArgumentError, ResourceLimitError
from .cursor import Cursor, read_name, read_argument
from .sinks import OutputSink, CaptureSink
from .symtab import MacroTable
from .source import read_file
from .support.failureprone import SourceText

VERBOSE = False
MAX_DEPTH = 100 # Each level costs a handful of Python frames; stay well inside the recursion limit.

def trace(message, *args):
	if VERBOSE: print(message%args, file=sys.stderr)

def substitute(body:str, argument:str) -> str:
	"""
	Build the text of a macro invocation from its body in a single left-to-right pass:
		An unescaped # becomes the argument, exactly as written.
		A backslash before a special character is dropped, leaving the special.
		A backslash before anything else stays, along with what it precedes.
	"""
	out = []
	position, size = 0, len(body)
	while position < size:
		c = body[position]
		if c == '\\':
			following = body[position+1:position+2]
			if following and following in SPECIALS: out.append(following)
			else: out.append(c+following)
			position += 2
		elif c == '#':
			out.append(argument)
			position += 1
		else:
			out.append(c)
			position += 1
	return ''.join(out)


class Expander:
	"""
	One of these processes a pass over a document. It holds the macro table,
	the file-inclusion collaborator, and the nesting limit. The sink is supplied
	per call, because some builtins need to capture an expansion as a value.
	"""

	def __init__(self, table:MacroTable=None, *, reader:Callable[[str], str]=read_file, max_depth:int=MAX_DEPTH):
		self.table = MacroTable() if table is None else table
		self.reader = reader
		self.max_depth = max_depth

	def expand(self, text:str, sink:OutputSink, *, origin:str=None):
		self._expand(text, sink, 0, origin)

	def expand_to_string(self, text:str, *, origin:str=None) -> str:
		return self._capture(text, 0, origin)

	def _capture(self, text, depth, origin) -> str:
		sink = CaptureSink()
		self._expand(text, sink, depth, origin)
		return sink.getvalue()

	def _expand(self, text:str, sink:OutputSink, depth:int, origin:Optional[str]):
		if depth > self.max_depth:
			raise ResourceLimitError("Nesting exceeds %d levels; is something expanding into itself?"%self.max_depth)
		cursor = Cursor(text)
		try:
			while cursor.has_more():
				cursor.begin()
				self._step(cursor, sink, depth)
		except ExpansionError as ex:
			caption = "expanded from here" if ex.evidence else "here"
			ex.locate(SourceText(text, filename=origin), cursor.slice(), caption)
			raise

	def _step(self, cursor:Cursor, sink:OutputSink, depth:int):
		c = cursor.peek()
		cursor.advance()
		if c != '\\':
			sink.append(c)
			return
		following = cursor.peek()
		if following is None:
			sink.append(c)
		elif following in SPECIALS:
			cursor.advance()
			sink.append(following)
		elif following in NAME_CHARS:
			name = read_name(cursor)
			if name in BUILTINS: self._builtin(BUILTINS[name], cursor, sink, depth)
			else: self._invoke(name, cursor, sink, depth)
		else:
			cursor.advance()
			sink.extend(c+following)

	def _builtin(self, builtin:Builtin, cursor:Cursor, sink:OutputSink, depth:int):
		args = []
		for _ in range(builtin.arity):
			arg = read_argument(cursor)
			if arg is None:
				raise ArityError("\\%s requires %d arguments, but got %d"%(builtin.keyword, builtin.arity, len(args)))
			args.append(arg)
		getattr(self, 'do_'+builtin.keyword)(cursor, sink, depth, *args)

	def _invoke(self, name:str, cursor:Cursor, sink:OutputSink, depth:int):
		body = self.table.lookup(name)
		if body is None:
			raise UndefinedMacroError("Macro %r not defined"%name)
		argument = read_argument(cursor)
		if argument is None:
			raise MissingArgumentError("Macro %r used without an argument"%name)
		self._expand(substitute(body, argument), sink, depth+1, "body of \\"+name)

	# Builtins. Each receives its arguments raw and unexpanded.

	def do_def(self, cursor, sink, depth, name, body):
		self.table.define(name, body)
		trace("Defined \\%s", name)

	def do_undef(self, cursor, sink, depth, name):
		self.table.undefine(name)
		trace("Undefined \\%s", name)

	def do_if(self, cursor, sink, depth, condition, then_part, else_part):
		branch = then_part if condition else else_part
		self._expand(branch, sink, depth+1, "branch of \\if")

	def do_ifdef(self, cursor, sink, depth, name, then_part, else_part):
		# An empty name is never defined, so it simply selects the ELSE part.
		if name: check_name(name, 'ifdef')
		branch = then_part if name in self.table else else_part
		self._expand(branch, sink, depth+1, "branch of \\ifdef")

	def do_include(self, cursor, sink, depth, path):
		"""
		The file's text is spliced in ahead of whatever follows the directive, and the
		two are expanded as one. A directive at the end of the file may therefore take
		its arguments from the including text. This call consumes the whole remainder.
		"""
		trace("Including %s", path)
		spliced = self.reader(path) + cursor.rest()
		self._expand(spliced, sink, depth+1, path)
		cursor.seek(len(cursor.text))

	def do_expandafter(self, cursor, sink, depth, before, after):
		expanded = self._capture(after, depth+1, "second argument of \\expandafter")
		self._expand(before + expanded, sink, depth+1, "\\expandafter")
