"""
The content normalizer: turn a captured block into the literal's actual value.

Two things happen here:

1. Indentation stripping. The closing marker's indentation is the yardstick.
	Every non-blank content line must begin with exactly that prefix, and loses it.
	Zero-length lines are exempt, so nobody has to pad blank lines with spaces.
	Note that a line of only spaces is not zero-length: it is held to the rule.

2. Newline trimming. The newline ending the opening line was never captured, and
	the newline ending the last content line belongs to the closing line. Whatever
	lies between is kept verbatim, including the CR of any interior CRLF line.

No escapes are decoded. There's nothing else to it.
"""
from .interface import RawQuoteBlock, Terminator, IndentationMismatch

def first_difference(text:str, prefix:str) -> int:
	""" Index of the first place `text` fails to match `prefix`; len(text) if it runs out first. """
	for i, (a, b) in enumerate(zip(text, prefix)):
		if a != b: return i
	return min(len(text), len(prefix))

def strip_indentation(block:RawQuoteBlock) -> list[str]:
	indent = block.close_indent
	width = len(indent)
	result = []
	for index, line in enumerate(block.content_lines):
		text = line.text
		if text:
			if not text.startswith(indent):
				raise IndentationMismatch(index, line.offset + first_difference(text, indent))
			text = text[width:]
		result.append(text)
	return result

def normalize(block:RawQuoteBlock) -> str:
	""" Produce the final value of a verbatim string literal, or raise IndentationMismatch. """
	stripped = strip_indentation(block)
	if not stripped: return ''
	pieces = []
	for text, line in zip(stripped, block.content_lines[:-1]):
		if line.terminator is Terminator.NONE:
			raise ValueError("Only the last content line may lack a terminator", line)
		pieces.append(text)
		pieces.append(line.terminator.value)
	pieces.append(stripped[-1])
	return ''.join(pieces)
