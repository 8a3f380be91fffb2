"""
A (maybe) convenient runtime interface to the most common use cases.

The QuoteReader ties the pipeline together: marker scanner, content normalizer,
and whatever read-only observers you care to attach. Use `read(...)` from within
your own lexer once it has spotted an opening marker. Use `each_literal(...)` if
you just want to pull every verbatim string out of a text, which is also a handy
example of how a host might isolate errors so that one bad literal doesn't hide
all the other problems in a file.
"""

import re
from typing import NamedTuple, Iterator

from .support.interfaces import QuoteErrorListener
from .scanning.interface import (
	DEFAULT_DIALECT, MINIMUM_MARKER, Dialect, RawQuoteBlock,
	NonWhitespaceAfterOpenMarker, UnterminatedBlock, IndentationMismatch,
)
from .scanning.marker import scan, skip_malformed
from .scanning.normalize import normalize

class Literal(NamedTuple):
	value: str
	block: RawQuoteBlock

def opening_pattern(dialect:Dialect):
	""" A regex finding runs of at least the minimum number of the same quote character. """
	return re.compile('([%s])\\1{%d,}'%(re.escape(dialect.quotes), MINIMUM_MARKER - 1))

class QuoteReader:
	def __init__(self, *, dialect:Dialect=DEFAULT_DIALECT, observers=(), on_error:QuoteErrorListener=None):
		self.dialect = dialect.check()
		self.observers = tuple(observers)
		self.on_error = QuoteErrorListener() if on_error is None else on_error

	def _observe(self, block:RawQuoteBlock):
		for observer in self.observers:
			observer.observe(block, self.on_error.issue)

	def read(self, text:str, offset:int=0) -> Literal:
		"""
		Read the one literal whose opening marker is at `offset`.
		Errors are raised directly; the listener only hears from observers.
		"""
		block = scan(text, offset, self.dialect)
		value = normalize(block)
		self._observe(block)
		return Literal(value, block)

	def each_literal(self, text:str) -> Iterator[Literal]:
		"""
		Treat every run of three or more quotes as an opening marker, and
		yield the literals in order. Malformed literals go to the error listener;
		if it returns normally, scanning picks up at the next plausible boundary.
		"""
		pattern = opening_pattern(self.dialect)
		offset = 0
		while True:
			match = pattern.search(text, offset)
			if match is None: return
			try: block = scan(text, match.start(), self.dialect)
			except NonWhitespaceAfterOpenMarker as ex:
				self.on_error.bad_opening_line(ex)
				# The body and closing line still follow; step over them, not into them.
				try: offset = skip_malformed(text, match.start(), self.dialect)
				except UnterminatedBlock: return
				continue
			except UnterminatedBlock as ex:
				self.on_error.unterminated(ex)
				return # Nothing after an unclosed block can be trusted.
			try: value = normalize(block)
			except IndentationMismatch as ex:
				self.on_error.bad_indentation(ex, block)
			else:
				self._observe(block)
				yield Literal(value, block)
			offset = block.end

def each_literal(text:str, **kwargs) -> Iterator[Literal]:
	""" Shorthand for QuoteReader(**kwargs).each_literal(text) """
	return QuoteReader(**kwargs).each_literal(text)
