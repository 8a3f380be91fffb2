"""
Verbatim multi-line string literals: marker scanning, indentation stripping,
and backward-compatibility observation. See `rawquote.runtime` to get started.
"""
