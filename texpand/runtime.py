"""
A (maybe) convenient runtime interface to the most common use cases:

1. Expand a whole document to a string, all or nothing.
2. Turn whatever went wrong into a single presentable Issue.

The all-or-nothing part matters. Expansion can fail at any point, by which time
plenty of text may already have been produced. That text goes to an accumulator
instead of a stream, and the accumulator only becomes a result if the whole pass
succeeds. So a caller sees the complete expansion or an exception, never a prefix.
"""

from .interface import ExpansionError, MissingFileError, ResourceLimitError
from .expander import Expander, MAX_DEPTH
from .sinks import ResultSink
from .source import read_file
from .support.failureprone import Issue, Severity

def expand_document(text:str, *, table=None, reader=read_file, max_depth=MAX_DEPTH, origin=None) -> str:
	accumulator = []
	expander = Expander(table, reader=reader, max_depth=max_depth)
	expander.expand(text, ResultSink(accumulator), origin=origin)
	return ''.join(accumulator)

def describe(ex:Exception) -> Issue:
	""" Present an exception from the expansion machinery (or a blown stack) as one Issue. """
	if isinstance(ex, RecursionError):
		ex = ResourceLimitError("Nesting too deep for the Python interpreter; try a smaller --max-depth")
	if isinstance(ex, MissingFileError) and not ex.evidence:
		phase = "reading input"
	else:
		phase = "expanding"
	evidence = ex.evidence if isinstance(ex, ExpansionError) else []
	return Issue(phase, Severity.ERROR, "%s: %s"%(type(ex).__name__, ex), evidence)
