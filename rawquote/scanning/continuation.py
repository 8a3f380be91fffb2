"""
Line-at-a-time consumption, as in a read-evaluate-print loop.

In a batch setting, running out of text inside a verbatim string is an error.
At an interactive prompt it just means the user hasn't finished typing. The
Continuation accumulates lines until the reader stops complaining about an
unterminated block. It never blocks on anything: the caller decides whether
to prompt for more input or to give up.
"""
from typing import Optional

from .interface import UnterminatedBlock

class Continuation:
	"""
	`reader` is anything with a `read(text, offset)` method and a `dialect`, normally a runtime.QuoteReader.
	"""
	def __init__(self, reader):
		self.__reader = reader
		self.__lines = []
		self.__offset = 0

	def is_pending(self) -> bool:
		""" True when some lines have been fed but they don't yet make a whole literal. """
		return bool(self.__lines)

	def reset(self):
		self.__lines.clear()
		self.__offset = 0

	def text(self) -> str:
		return ''.join(self.__lines)

	def _indentation(self, line:str) -> int:
		""" Width of the leading whitespace, as the reader's dialect defines whitespace. """
		is_space = self.__reader.dialect.is_space
		width = 0
		while width < len(line) and is_space(line[width]): width += 1
		return width

	def feed(self, line:str, offset:Optional[int]=None):
		"""
		Supply the next line of input, including its line break if it has one.
		For the first line, `offset` says where the opening marker is; by default,
		at the first non-whitespace character.
		Returns None if more input is needed; otherwise the literal.
		Any other error propagates, after which the continuation starts afresh.
		"""
		if not self.__lines:
			self.__offset = self._indentation(line) if offset is None else offset
		self.__lines.append(line)
		try: literal = self.__reader.read(self.text(), self.__offset)
		except UnterminatedBlock: return None
		except ValueError:
			self.reset()
			raise
		self.reset()
		return literal
