"""
Verbatim String Interface Definitions.

The types here are deliberately dumb: a RawQuoteBlock is what the marker scanner
captured, exactly as it appeared, and nothing more. All the interpretation happens
in the normalizer. Everything is an immutable tuple, so a block may be handed to
as many read-only observers as you like.
"""
from enum import Enum
from typing import NamedTuple

from ..support.interfaces import LanguageError

MINIMUM_MARKER = 3

# A host lexer has its own notion of whitespace; a verbatim string must agree with it,
# or else indentation would mean one thing in ordinary tokens and another in here.
# Line breaks are never whitespace for these purposes: they delimit lines.
WHITESPACE_MODE = {
	'normal': ' \t'.__contains__,
	'ascii': ' \t\f\v'.__contains__,
	'unicode': lambda c: c.isspace() and c not in '\r\n',
}

class Dialect(NamedTuple):
	""" What the host language considers a quote character and whitespace. """
	quotes: str = '"'
	whitespace: str = 'normal'

	def is_space(self, char:str) -> bool:
		return WHITESPACE_MODE[self.whitespace](char)

	def check(self):
		""" Raise ValueError unless this dialect can actually be used. """
		if self.whitespace not in WHITESPACE_MODE:
			raise ValueError("Unknown whitespace mode %r; expected one of %s"%(self.whitespace, ', '.join(sorted(WHITESPACE_MODE))))
		if not self.quotes:
			raise ValueError("A dialect needs at least one quote character")
		return self

DEFAULT_DIALECT = Dialect()

class Terminator(Enum):
	LF = '\n'
	CRLF = '\r\n'
	NONE = ''

class Line(NamedTuple):
	""" One captured line. The text excludes the terminator; offset is where the text starts in the source. """
	text: str
	terminator: Terminator
	offset: int

class RawQuoteBlock(NamedTuple):
	"""
	quote_length: how many quote characters make up the marker (at least three).
	open_line_trailing: whatever whitespace followed the opening marker on its line.
	content_lines: the lines strictly between the opening and closing marker lines.
	close_indent: the whitespace preceding the closing marker.
	quote: which quote character the marker is made of.
	start: offset of the opening marker.
	end: offset just past the closing marker. The host resumes scanning here.
	"""
	quote_length: int
	open_line_trailing: str
	content_lines: tuple[Line, ...]
	close_indent: str
	quote: str = '"'
	start: int = 0
	end: int = 0

	def opening_span(self) -> slice: return slice(self.start, self.start + self.quote_length)
	def closing_span(self) -> slice: return slice(self.end - self.quote_length, self.end)


class QuoteError(LanguageError):
	"""
	Base of the (closed) family of things that can go wrong with a verbatim string.
	There are exactly three: see the subclasses. Each knows the source offset
	where the trouble is, and names the rule that was violated.
	"""
	rule = "malformed verbatim string"
	position: int

class NonWhitespaceAfterOpenMarker(QuoteError):
	rule = "only whitespace may follow the opening marker on its line"
	def __init__(self, position):
		super().__init__(position)
		self.position = position

class UnterminatedBlock(QuoteError):
	"""
	The text ran out before a closing marker line appeared.
	`position` is the opening marker; `end` is where the text ran out.
	An interactive caller may supply more lines and try again.
	"""
	rule = "verbatim string has no closing marker"
	def __init__(self, position, end):
		super().__init__(position, end)
		self.position, self.end = position, end

class IndentationMismatch(QuoteError):
	"""
	A non-blank content line fails to begin with the closing marker's indentation.
	`line_index` counts content lines from zero; `position` is the first character that differs.
	"""
	rule = "every non-blank line must begin with the closing marker's indentation"
	def __init__(self, line_index, position):
		super().__init__(line_index, position)
		self.line_index, self.position = line_index, position
