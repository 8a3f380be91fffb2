"""
The marker scanner: capture a verbatim string block from source text.

By the time we get here, the host lexer has already decided that a run of quote
characters begins a verbatim string. Our job is to find where it ends, and to
collect the lines in between exactly as written. Interpretation of those lines
(indentation and so forth) is the normalizer's business.

It's a small finite-state machine. The states and their transitions are:

	AWAITING_OPEN_LINE_END:
		whitespace -> stay
		line break -> CAPTURING_CONTENT
		anything else -> error (NonWhitespaceAfterOpenMarker)
		end of text -> error (UnterminatedBlock)
	CAPTURING_CONTENT, one whole line at a time:
		whitespace then exactly n quotes, then no further quote -> DONE
		any other complete line -> stay, having captured the line
		end of text -> error (UnterminatedBlock)

The quote-count `n` is fixed by the opening marker. A line with a different run
length never closes the block, even if it's one quote short or one quote long.
That rule is what lets authors pick a longer marker when the content contains
runs of three quotes.
"""
from enum import Enum

from .interface import (
	MINIMUM_MARKER, DEFAULT_DIALECT, Dialect, Terminator, Line, RawQuoteBlock,
	NonWhitespaceAfterOpenMarker, UnterminatedBlock,
)

class State(Enum):
	AWAITING_OPEN_LINE_END = 'awaiting the end of the opening line'
	CAPTURING_CONTENT = 'capturing content'
	DONE = 'done'

def run_length(text:str, offset:int, char:str, stop:int=None) -> int:
	""" How many consecutive copies of `char` appear in `text` starting at `offset`, not looking past `stop`. """
	stop = len(text) if stop is None else stop
	cursor = offset
	while cursor < stop and text[cursor] == char: cursor += 1
	return cursor - offset

class MarkerScanner:
	"""
	One scanner object per literal. Call `run()` once to get the RawQuoteBlock.
	The `position` attribute tracks the scanner's progress through the text.
	"""
	def __init__(self, text:str, offset:int=0, dialect:Dialect=DEFAULT_DIALECT):
		dialect.check()
		if offset >= len(text) or text[offset] not in dialect.quotes:
			raise ValueError("No verbatim string marker at offset %d"%offset)
		self.text = text
		self.start = offset
		self.quote = text[offset]
		self.quote_length = run_length(text, offset, self.quote)
		if self.quote_length < MINIMUM_MARKER:
			raise ValueError("A verbatim string marker needs at least %d quotes; found %d at offset %d"%(MINIMUM_MARKER, self.quote_length, offset))
		self.is_space = dialect.is_space
		self.position = offset + self.quote_length
		self.state = State.AWAITING_OPEN_LINE_END
		self.open_line_trailing = ''
		self.content_lines = []
		self.close_indent = None

	def run(self) -> RawQuoteBlock:
		transition = {
			State.AWAITING_OPEN_LINE_END: self.awaiting_open_line_end,
			State.CAPTURING_CONTENT: self.capturing_content,
		}
		while self.state is not State.DONE:
			self.state = transition[self.state]()
		return RawQuoteBlock(
			quote_length=self.quote_length,
			open_line_trailing=self.open_line_trailing,
			content_lines=tuple(self.content_lines),
			close_indent=self.close_indent,
			quote=self.quote,
			start=self.start,
			end=self.position,
		)

	def _line_end(self):
		""" Offset of the next LF, or of the end of text if there is none. """
		nl = self.text.find('\n', self.position)
		return len(self.text) if nl < 0 else nl

	def awaiting_open_line_end(self) -> State:
		text, left = self.text, self.position
		right = self._line_end()
		trailing = text[left:right]
		if trailing.endswith('\r'): trailing = trailing[:-1] # Half of a CRLF, or will be if more input arrives.
		for i, c in enumerate(trailing):
			if not self.is_space(c): raise NonWhitespaceAfterOpenMarker(left + i)
		if right == len(text): raise UnterminatedBlock(self.start, right)
		self.open_line_trailing = trailing
		self.position = right + 1
		return State.CAPTURING_CONTENT

	def capturing_content(self) -> State:
		text, left = self.text, self.position
		if left >= len(text): raise UnterminatedBlock(self.start, left)
		right = self._line_end()
		indent_end = left
		while indent_end < right and self.is_space(text[indent_end]): indent_end += 1
		if run_length(text, indent_end, self.quote, right) == self.quote_length:
			self.close_indent = text[left:indent_end]
			self.position = indent_end + self.quote_length
			return State.DONE
		if right == len(text):
			# An incomplete last line (Terminator.NONE) is not a closing line, so no block can end here.
			raise UnterminatedBlock(self.start, right)
		if right > left and text[right-1] == '\r':
			self.content_lines.append(Line(text[left:right-1], Terminator.CRLF, left))
		else:
			self.content_lines.append(Line(text[left:right], Terminator.LF, left))
		self.position = right + 1
		return State.CAPTURING_CONTENT

	def resynchronize(self) -> int:
		"""
		Skip the opening line without judging it, then capture as usual.
		Returns the offset just past the closing marker; raises UnterminatedBlock if there is none.
		"""
		right = self._line_end()
		if right == len(self.text): raise UnterminatedBlock(self.start, right)
		self.position = right + 1
		self.state = State.CAPTURING_CONTENT
		return self.run().end

def scan(text:str, offset:int=0, dialect:Dialect=DEFAULT_DIALECT) -> RawQuoteBlock:
	"""
	Capture the verbatim string block whose opening marker begins at `offset`.
	Raises NonWhitespaceAfterOpenMarker or UnterminatedBlock for malformed input,
	and plain ValueError if there isn't an opening marker at `offset` at all.
	"""
	return MarkerScanner(text, offset, dialect).run()

def skip_malformed(text:str, offset:int=0, dialect:Dialect=DEFAULT_DIALECT) -> int:
	"""
	For error recovery after NonWhitespaceAfterOpenMarker: find where the block
	opened at `offset` ends anyway, so its closing marker is not mistaken for a new opening.
	"""
	return MarkerScanner(text, offset, dialect).resynchronize()
