import unittest
from rawquote.scanning import marker
from rawquote.scanning.interface import (
	Dialect, Terminator, Line,
	NonWhitespaceAfterOpenMarker, UnterminatedBlock,
)

def texts(block): return [line.text for line in block.content_lines]

class TestMarkerScanner(unittest.TestCase):
	def test_00_smallest_block(self):
		block = marker.scan('"""\n"""')
		self.assertEqual(3, block.quote_length)
		self.assertEqual((), block.content_lines)
		self.assertEqual('', block.close_indent)
		self.assertEqual(0, block.start)
		self.assertEqual(7, block.end)

	def test_01_captures_lines_verbatim(self):
		block = marker.scan('"""\n  a\\n b\n\n\t c\n  """')
		self.assertEqual(['  a\\n b', '', '\t c'], texts(block))
		self.assertEqual('  ', block.close_indent)
		self.assertEqual([Terminator.LF]*3, [line.terminator for line in block.content_lines])
		self.assertEqual([4, 12, 13], [line.offset for line in block.content_lines])

	def test_02_offset_and_resume_point(self):
		text = 'x = """\nhello\n""".upper()'
		block = marker.scan(text, 4)
		self.assertEqual(4, block.start)
		self.assertEqual('.upper()', text[block.end:])
		self.assertEqual(slice(4, 7), block.opening_span())
		self.assertEqual(text.index('"""', 8), block.closing_span().start)

	def test_03_open_line_trailing_whitespace(self):
		block = marker.scan('""" \t \nX\n"""')
		self.assertEqual(' \t ', block.open_line_trailing)
		self.assertEqual(['X'], texts(block))

	def test_04_non_whitespace_after_open_marker(self):
		for text, position in [
			('"""x\n"""', 3),
			('"""  # comment\n"""', 5),
			('"""  y', 5), # Even when the text runs out, the bad character is reported first.
		]:
			with self.subTest(text=text):
				with self.assertRaises(NonWhitespaceAfterOpenMarker) as cm:
					marker.scan(text)
				self.assertEqual(position, cm.exception.position)

	def test_05_unterminated(self):
		for text in ['"""', '"""   ', '"""\n', '"""\nabc', '"""\nabc\n', '""""\n"""\n', '"""\n""""\n']:
			with self.subTest(text=text):
				with self.assertRaises(UnterminatedBlock) as cm:
					marker.scan(text)
				self.assertEqual(0, cm.exception.position)
				self.assertEqual(len(text), cm.exception.end)

	def test_06_exact_count_only(self):
		""" A run of a different length never closes the block, whether longer or shorter. """
		block = marker.scan('""""\n"""\n  """""\n""""')
		self.assertEqual(4, block.quote_length)
		self.assertEqual(['"""', '  """""'], texts(block))
		block = marker.scan('"""\n""""\n""\n"""')
		self.assertEqual(['""""', '""'], texts(block))

	def test_07_three_quote_line_terminates_three_quote_block(self):
		block = marker.scan('"""\na\n"""\nb\n"""')
		self.assertEqual(['a'], texts(block))
		self.assertEqual(9, block.end)

	def test_08_marker_must_come_first(self):
		block = marker.scan('"""\nx """\n  y """\n"""')
		self.assertEqual(['x """', '  y """'], texts(block))

	def test_09_host_text_after_closing_marker(self):
		text = '"""\nabc\n  """, """\n'
		block = marker.scan(text)
		self.assertEqual(['abc'], texts(block))
		self.assertEqual(', """\n', text[block.end:])

	def test_10_crlf(self):
		block = marker.scan('"""\r\na\r\n\r\nb\rc\r\n"""\r\n')
		self.assertEqual('', block.open_line_trailing)
		self.assertEqual([
			Line('a', Terminator.CRLF, 5),
			Line('', Terminator.CRLF, 8),
			Line('b\rc', Terminator.CRLF, 10),
		], list(block.content_lines))
		self.assertEqual(18, block.end)

	def test_11_lone_cr_is_not_a_line_break(self):
		with self.assertRaises(NonWhitespaceAfterOpenMarker) as cm:
			marker.scan('"""\r"""\n"""')
		self.assertEqual(3, cm.exception.position)

	def test_12_no_marker(self):
		for text, offset in [('""\n""', 0), ('abc', 0), ('"""', 1), ('', 0)]:
			with self.subTest(text=text, offset=offset):
				with self.assertRaises(ValueError):
					marker.scan(text, offset)

	def test_13_dialect(self):
		block = marker.scan("'''\n  x\n  '''", dialect=Dialect("'\""))
		self.assertEqual("'", block.quote)
		self.assertEqual(['  x'], texts(block))
		# A different quote character does not close the block.
		with self.assertRaises(UnterminatedBlock):
			marker.scan("'''\nx\n\"\"\"", dialect=Dialect("'\""))
		with self.assertRaises(ValueError):
			marker.scan("'''\n'''")

	def test_14_whitespace_modes(self):
		text = '"""\f\nx\n"""'
		with self.assertRaises(NonWhitespaceAfterOpenMarker):
			marker.scan(text)
		self.assertEqual('\f', marker.scan(text, dialect=Dialect(whitespace='ascii')).open_line_trailing)
		wide = '"""　\nx\n　"""'
		self.assertEqual('　', marker.scan(wide, dialect=Dialect(whitespace='unicode')).close_indent)

	def test_15_state_machine_finishes_done(self):
		scanner = marker.MarkerScanner('"""\nx\n"""')
		self.assertIs(marker.State.AWAITING_OPEN_LINE_END, scanner.state)
		scanner.run()
		self.assertIs(marker.State.DONE, scanner.state)

	def test_16_run_length(self):
		self.assertEqual(5, marker.run_length('a"""""b', 1, '"'))
		self.assertEqual(2, marker.run_length('a"""""b', 1, '"', 3))
		self.assertEqual(0, marker.run_length('abc', 0, '"'))

	def test_17_unknown_whitespace_mode(self):
		with self.assertRaises(ValueError) as cm:
			marker.scan('"""\nx\n"""', dialect=Dialect(whitespace='bogus'))
		self.assertIn('bogus', str(cm.exception))

	def test_18_skip_malformed(self):
		text = '""" x\n  body\n  """ + 1'
		with self.assertRaises(NonWhitespaceAfterOpenMarker):
			marker.scan(text)
		self.assertEqual(' + 1', text[marker.skip_malformed(text):])
		with self.assertRaises(UnterminatedBlock):
			marker.skip_malformed('""" x\n  body\n')
		with self.assertRaises(UnterminatedBlock):
			marker.skip_malformed('""" x')


if __name__ == '__main__':
	unittest.main()
