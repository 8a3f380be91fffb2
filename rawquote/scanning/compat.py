"""
Backward-compatibility observation.

Before verbatim strings existed, a run of quote characters was just a sequence of
ordinary string literals: two quotes make an empty string, and adjacent strings
concatenate. So under the prior grammar a four-quote marker was two empty strings
side by side, and five quotes were two empty strings followed by the opening of a
third, ordinary, string. Source text like that now means something quite different.

A three-quote marker is left alone: under the old reading it opens an ordinary string
that immediately meets a line break, which was never valid to begin with.

The observer here only reports. It never changes what a literal means.
"""
from ..support.interfaces import BlockObserver
from ..support.failureprone import Issue, Severity, Evidence
from .interface import RawQuoteBlock

PHASE = "reading a verbatim string"

def legacy_reading(quote_length:int) -> str:
	""" Describe in words how the prior grammar would have read a marker of this length. """
	pairs, odd = divmod(quote_length, 2)
	text = "%d adjacent empty strings"%pairs
	if odd: text += " followed by the start of an ordinary string"
	return text

class LegacyConcatenationObserver(BlockObserver):
	"""
	Report blocks whose markers would have parsed as concatenated empty strings.
	`key` names the source text in the resulting Issue's evidence (usually a filename).
	"""
	def __init__(self, key=None, threshold:int=4):
		self.key = key
		self.threshold = threshold

	def observe(self, block:RawQuoteBlock, report):
		if block.quote_length < self.threshold: return
		description = "a %d-quote marker formerly read as %s; it now begins a verbatim string"%(block.quote_length, legacy_reading(block.quote_length))
		evidence = [Evidence(block.opening_span(), "opening marker"), Evidence(block.closing_span(), "closing marker")]
		report(Issue(PHASE, Severity.WARNING, description, {self.key: evidence}))
