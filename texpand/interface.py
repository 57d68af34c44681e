"""
This file aggregates the exception types and design constants which the expander deals in.

Every failure in this language is fatal. There is no recovery mode, so the exception
hierarchy is flat: one base class and a kind per way things can go wrong. What makes
them a little more than plain exceptions is the evidence trail. As an error propagates
outward through nested expansions, each frame adds the text it was working on and the
span of the directive in progress. The driver turns all that into a single decent-looking
report (see `support.failureprone`).
"""

import string
from enum import Enum

from .support.failureprone import Evidence

SPECIALS = frozenset('\\{}#%') # Characters which a backslash turns into plain text.
NAME_CHARS = frozenset(string.ascii_letters + string.digits)

class ExpansionError(ValueError):
	""" Base class of all exceptions arising from the expansion machinery. """
	def __init__(self, *args):
		super().__init__(*args)
		self.evidence = [] # (SourceText, Evidence) pairs, innermost first.

	def locate(self, source, a_slice:slice, caption="here"):
		""" Called by each frame the error passes through on its way out. """
		self.evidence.append((source, Evidence(a_slice, caption)))

class DuplicateMacroError(ExpansionError): pass
class UnknownMacroError(ExpansionError): pass
class InvalidNameError(ExpansionError): pass
class UnbalancedBraceError(ExpansionError): pass
class ArityError(ExpansionError): pass
class UndefinedMacroError(ExpansionError): pass
class MissingArgumentError(ExpansionError): pass
class ResourceLimitError(ExpansionError): pass

class MissingFileError(ExpansionError):
	""" An input or included file could not be opened. """
	def __init__(self, path):
		super().__init__("Cannot open file %r"%path)
		self.path = path


class Builtin(Enum):
	"""
	The closed set of control forms. Each knows its keyword and how many
	brace-delimited arguments it takes; the expander reads exactly that many
	before anything happens.
	"""
	DEF = ('def', 2)
	UNDEF = ('undef', 1)
	IF = ('if', 3)
	IFDEF = ('ifdef', 3)
	INCLUDE = ('include', 1)
	EXPANDAFTER = ('expandafter', 2)

	def __init__(self, keyword, arity):
		self.keyword = keyword
		self.arity = arity

BUILTINS = {b.keyword: b for b in Builtin}


def is_valid_name(name:str) -> bool:
	return bool(name) and all(c in NAME_CHARS for c in name)

def check_name(name:str, context:str):
	""" Raise InvalidNameError unless `name` is a non-empty run of ASCII alphanumerics. """
	if not is_valid_name(name):
		raise InvalidNameError("Invalid macro name %r in \\%s"%(name, context))
