"""
Expand TeX-style macros in one or more documents and write the result to standard output.

With no source files, standard input is read instead. Lines may carry %-comments.
Builtins: \\def{NAME}{BODY} \\undef{NAME} \\if{COND}{THEN}{ELSE} \\ifdef{NAME}{THEN}{ELSE}
\\include{PATH} \\expandafter{BEFORE}{AFTER}. User macros take one argument, substituted for #.

Output appears only if the whole expansion succeeds. Otherwise a single
diagnostic goes to standard error and the exit status is 1.
"""

import sys, argparse

from texpand import expander, runtime
from texpand.interface import ExpansionError
from texpand.source import read_sources

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m texpand', description=__doc__, formatter_class=argparse.RawDescriptionHelpFormatter)
	parser.add_argument('sources', nargs='*', metavar='source', help='path to input file (default: standard input)')
	parser.add_argument('--max-depth', type=int, default=expander.MAX_DEPTH, help='how deeply directives may nest before giving up (default: %(default)s)')
	parser.add_argument('-v', '--verbose', action='store_true', help="Squawk on standard error about definitions and inclusions.")
	return parser.parse_args(argv)

def main(args) -> int:
	if args.verbose: expander.VERBOSE = True
	try:
		document = read_sources(args.sources)
		if not args.sources: origin = '<stdin>'
		elif len(args.sources) == 1: origin = args.sources[0]
		else: origin = None # Concatenated; offsets no longer belong to any one file.
		result = runtime.expand_document(document, max_depth=args.max_depth, origin=origin)
	except (ExpansionError, RecursionError) as ex:
		runtime.describe(ex).emit()
		return 1
	else:
		sys.stdout.write(result)
		sys.stdout.flush()
		return 0

if __name__ == '__main__': sys.exit(main(parse_arguments()))
