"""
Folio reader backend.

Turns EPUB archives and PDF documents into an ordered list of chapters or
pages with display-ready markup.
"""

__version__ = "0.1.0"
