"""
Extract the verbatim string literals from a text file, or try them out interactively.

Every run of three or more quote characters is taken to open a verbatim string.
Each literal's final value is printed along with where it was found; malformed
literals get an error message with an illustrated excerpt, and scanning continues.
"""

import sys, argparse, json

from rawquote.support.failureprone import SourceText
from rawquote.support.interfaces import QuoteErrorListener
from rawquote.scanning.interface import WHITESPACE_MODE, Dialect, QuoteError
from rawquote.scanning.compat import LegacyConcatenationObserver
from rawquote.scanning.continuation import Continuation
from rawquote.runtime import QuoteReader

def parse_arguments(argv=None):
	parser = argparse.ArgumentParser(prog='py -m rawquote', description=__doc__,)
	parser.add_argument('source_path', nargs='?', help='path to input file; omit for an interactive session')
	parser.add_argument('-i', '--interactive', action='store_true', help='read literals from the terminal, one at a time.')
	parser.add_argument('--json', action='store_true', help='print the literals as a JSON list instead of one per line.')
	parser.add_argument('--indent', help='indent the JSON output for easier reading.', action='store_const', dest='indent', const=2, default=None)
	parser.add_argument('--quote', default='"', help='characters which may form a marker (default: %(default)s)')
	parser.add_argument('--whitespace', default='normal', choices=sorted(WHITESPACE_MODE), help='what counts as whitespace (default: %(default)s)')
	parser.add_argument('--no-compat', action='store_false', dest='compat', help='do not warn about markers the old grammar read differently.')
	parser.add_argument('--strict', action='store_true', help='exit with an error status if any literal is malformed.')
	return parser.parse_args(argv)

class Complainer(QuoteErrorListener):
	""" Record and describe problems, but keep going. """
	def __init__(self, source:SourceText):
		self.source = source
		self.nr_errors = 0

	def _gripe(self, error):
		self.nr_errors += 1
		print(self.source.describe(error), file=sys.stderr)

	def bad_opening_line(self, error): self._gripe(error)
	def unterminated(self, error): self._gripe(error)
	def bad_indentation(self, error, block): self._gripe(error)
	def issue(self, issue): issue.emit(lambda key: self.source)

def make_reader(args, on_error, key=None) -> QuoteReader:
	observers = [LegacyConcatenationObserver(key)] if args.compat else []
	return QuoteReader(dialect=Dialect(args.quote, args.whitespace), observers=observers, on_error=on_error)

def extract(args) -> int:
	with open(args.source_path, newline='') as fh: document = fh.read()
	source = SourceText(document, filename=args.source_path)
	complainer = Complainer(source)
	reader = make_reader(args, complainer, args.source_path)
	found = []
	for literal in reader.each_literal(document):
		row, col = source.find_row_col(literal.block.start)
		found.append({'line': row, 'column': col+1, 'marker': literal.block.quote_length, 'value': literal.value})
	if args.json:
		json.dump(found, sys.stdout, indent=args.indent)
		print()
	else:
		for item in found: print('%(line)d:%(column)d: %(value)r'%item)
	return 1 if args.strict and complainer.nr_errors else 0

def interact(args) -> int:
	continuation = Continuation(make_reader(args, QuoteErrorListener()))
	while True:
		try: line = input('... ' if continuation.is_pending() else '>>> ')
		except EOFError:
			print()
			return 0
		pending = continuation.text() + line + '\n'
		try: literal = continuation.feed(line + '\n')
		except QuoteError as ex:
			print(SourceText(pending).describe(ex), file=sys.stderr)
			continue
		except ValueError as ex:
			print(ex, file=sys.stderr)
			continue
		if literal is not None: print(repr(literal.value))

def main(args):
	if args.interactive or args.source_path is None: return interact(args)
	return extract(args)

if __name__ == '__main__': sys.exit(main(parse_arguments()))
