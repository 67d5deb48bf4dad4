"""Citation format builders.

Each builder renders a ``CitationRecord`` in one format:

- PlainTextBuilder: human-readable citation, optionally HTML-escaped
- BibtexBuilder: BibTeX ``@misc`` record
- RisBuilder: RIS tagged record
- EndNoteBuilder: EndNote XML document
"""

from .base import CitationBuilder, CitationFormat
from .bibtex import BibtexBuilder, BibtexValueEscaper
from .endnote import EndNoteBuilder
from .plain import PlainTextBuilder, html_escape
from .ris import RisBuilder

__all__ = [
    "CitationBuilder",
    "CitationFormat",
    "PlainTextBuilder",
    "BibtexBuilder",
    "BibtexValueEscaper",
    "RisBuilder",
    "EndNoteBuilder",
    "html_escape",
]
