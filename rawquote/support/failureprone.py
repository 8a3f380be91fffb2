"""
All about showing people where their verbatim strings went wrong.

The scanner and normalizer speak only in character offsets. That keeps them simple
and keeps line-breaking out of the core algorithms. Humans, on the other hand, want
a line and column number, and ideally a picture of the offending line with the bad
spot underlined. The SourceText wrapper converts between the two views, and the
`illustration` function draws the picture.

Line breaks here follow the same rule as the literal scanner itself: a line ends at
LF, and a CR is only special when it sits immediately before that LF. A lone CR is
an ordinary character. Reporting positions any other way would make the column
numbers in error messages disagree with what the scanner actually did.

Issues are for things worth saying that are not (necessarily) fatal: an observer
may notice something about a literal which deserves a warning. An Issue gathers a
description along with evidence in one or more source texts, and knows how to render
itself as plain text once somebody supplies a way to fetch those texts by key.
"""

import bisect, re, sys
from typing import NamedTuple, Any, Optional
from enum import Enum

LINE_BREAK = re.compile(r'\n')

class Severity(Enum):
	NOTICE = "Notice"
	WARNING = "Warning"
	ERROR = "Error"

class Evidence(NamedTuple):
	slice: slice
	caption: str = "here"

	def width(self): return self.slice.stop - self.slice.start

class Issue(NamedTuple):
	"""
	phase: what the machinery was doing when it noticed (e.g. "reading a verbatim string").
	severity: how bad it is.
	description: plain-language explanation.
	evidence: from source "key" (as known to a "fetch" function) to a list of Evidence.
	"""
	phase: str
	severity: Severity
	description: str
	evidence: dict[Any, list[Evidence]]

	def as_text(self, fetch=None) -> str:
		"""
		Render the issue for a text console. If `fetch` is given, it must map each
		evidence key to a SourceText, and the report includes illustrated excerpts.
		Without it, you get bare character offsets.
		"""
		lines = ["%s while %s: %s"%(self.severity.value, self.phase, self.description)]
		for key, evidence in self.evidence.items():
			if fetch is None:
				where = ', '.join('%s at offset %d'%(e.caption, e.slice.start) for e in evidence)
				lines.append("  in %s: %s"%(key, where))
				continue
			source = fetch(key)
			if source.filename: lines.append("Excerpt from "+source.filename+" :")
			for e in evidence:
				row, col = source.find_row_col(e.slice.start)
				lines.append(illustration(source.line_of_text(row), col, e.width(), prefix='% 6d :'%row, caption=e.caption))
		return "\n".join(lines)

	def emit(self, fetch=None):
		""" Print the rendered issue on standard error. """
		print(self.as_text(fetch), file=sys.stderr)

def illustration(single_line:str, start:int, width:int=0, *, prefix='', caption="near here") -> str:
	""" Picture where something appears in a line of text. Tabs are kept so the caret lines up. """
	single_line = single_line.rstrip('\r\n')
	blanks = ''.join(c if c == '\t' else ' ' for c in prefix + single_line[:start])
	underline = '^' * max(1, min(width, len(single_line) - start))
	return prefix + single_line + '\n' + blanks + underline + " " + caption

class SourceText:
	""" Wrapper for (a section of) source text: converts offsets to rows and columns and composes complaints. """
	def __init__(self, content:str, filename:Optional[str]=None, first_line=1):
		self.content = content
		self.filename = filename
		self.first_line = first_line
		self.__bounds = None

	def __make_bounds(self):
		""" Lazily find the line breaks, only if it turns out to be necessary. """
		if self.__bounds is None:
			inside = [m.end() for m in LINE_BREAK.finditer(self.content)]
			self.__bounds = [0] + inside + [len(self.content)]
		return self.__bounds

	def find_row_col(self, index:int):
		""" Based on a character offset from the start of text. Row respects self.first_line; column is zero-based. """
		bounds = self.__make_bounds()
		row = bisect.bisect_right(bounds, index, hi=len(bounds) - 1) - 1
		return row + self.first_line, index - bounds[row]

	def line_of_text(self, row) -> str:
		""" Argument respects self.first_line. """
		bounds = self.__make_bounds()
		r = min(max(0, row - self.first_line), len(bounds) - 2)
		return self.content[bounds[r]:bounds[r + 1]]

	def _format_message(self, row, col, message):
		prefix = "At" if self.filename is None else str(self.filename)+":"
		return "%s line %d, column %d: %s" % (prefix, row, col + 1, message)

	def complaint(self, a_slice:slice, message:str) -> str:
		row, col = self.find_row_col(a_slice.start)
		reference = self._format_message(row, col, message)
		illustrated = illustration(self.line_of_text(row), col, a_slice.stop - a_slice.start, prefix=' >>> ')
		return "%s\n%s"%(reference, illustrated)

	def describe(self, error) -> str:
		""" Compose a complaint about one of the QuoteError family, which all carry a `position`. """
		return self.complaint(slice(error.position, error.position + 1), error.rule)
