"""
The macro table: one flat namespace mapping names to raw, unexpanded bodies.

The usual patterns of interaction with a symbol table apply here in their simplest form:

* adding a name, expecting it not already to exist.
* removing a name, expecting it surely to exist.
* looking up a name, with the plan to do something else if it is not found.

The key question is what comes next when an expectation is falsified.
The first two raise an exception. The third just returns None, because
the caller has a perfectly good plan for that case.

There is no scoping. A definition made anywhere (inside a conditional branch,
an included file, or the argument of an \\expandafter) is visible to all the
text processed after it. The expander shares one table by reference across
every nested call of a pass.
"""

from typing import Optional

from .interface import BUILTINS, DuplicateMacroError, UnknownMacroError, InvalidNameError, check_name

class MacroTable:
	def __init__(self):
		self.local : dict[str, str] = {}

	def define(self, name:str, body:str):
		check_name(name, 'def')
		if name in BUILTINS:
			raise InvalidNameError("Cannot redefine builtin \\%s"%name)
		if name in self.local:
			raise DuplicateMacroError("Macro %r already defined"%name)
		self.local[name] = body

	def undefine(self, name:str):
		try: del self.local[name]
		except KeyError: raise UnknownMacroError("Cannot undefine %r: not defined"%name) from None

	def lookup(self, name:str) -> Optional[str]:
		return self.local.get(name)

	def __contains__(self, name):
		return name in self.local

	def __len__(self):
		return len(self.local)
