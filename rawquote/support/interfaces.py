"""
This file aggregates the abstract classes and base exception types which rawquote deals in.

The verbatim-string machinery proper is a pure pipeline: scan a block, then normalize it.
Everything a host application might want to customize sits at the edges of that pipeline
and gets expressed here as a small interface with a sensible default behavior:

	BlockObserver: an optional, read-only stage which looks at a captured block after
		it has been successfully normalized. It may report issues, but nothing it does can
		alter the value of the literal.

	QuoteErrorListener: decides what becomes of a malformed literal. The default is to
		raise the error, which is right for a one-shot call. A host that wants to keep going
		and report more than one problem per compilation unit overrides the methods.
"""

import warnings

class LanguageError(ValueError):
	""" Base class of all exceptions arising from the language machinery. """


class BlockObserver:
	"""
	Implement this interface to inspect captured blocks without changing them.

	Blocks are immutable, so there is nothing to protect against; but an observer
	should also have no effect on the literal's value, and must not raise for
	anything short of a genuine bug in the observer itself.
	"""
	def observe(self, block, report):
		"""
		`block` is the RawQuoteBlock just normalized.
		`report` is a callable which accepts a `failureprone.Issue`.
		Return value is ignored.
		"""
		raise NotImplementedError(type(self))


class QuoteErrorListener:
	"""
	Implement this interface to report/respond to malformed literals.

	Every method receives the error object, which knows its own source position.
	By the time a listener hears of a problem, the literal is abandoned: no partial
	value exists. The caller will resume scanning at the next plausible boundary if
	the listener returns normally.
	"""

	def bad_opening_line(self, error):
		""" The opening marker was followed by something other than whitespace. """
		raise error

	def unterminated(self, error):
		"""
		The text ran out before a closing marker appeared.
		In batch mode this is the end of the line for the whole unit.
		"""
		raise error

	def bad_indentation(self, error, block):
		"""
		A content line did not begin with the closing marker's indentation.
		`block` is the block as captured, should you care to show more context.
		"""
		raise error

	def issue(self, issue):
		"""
		An observer had something to say. Default behavior is to pass a
		textual rendering along to the `warnings` module as a SyntaxWarning.
		"""
		warnings.warn(issue.as_text(), SyntaxWarning, stacklevel=2)
