"""Styled terminal cells for file listings: widths, escaping, tree lines, column renderers, timestamps and icons."""

__version__ = "0.1.0"