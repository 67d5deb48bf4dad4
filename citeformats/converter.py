"""Entry point for rendering a record in any supported citation format."""

import logging
from typing import TYPE_CHECKING

from citeformats.core.exceptions import UnsupportedFormatError
from citeformats.core.labels import BundleLabelResolver, LabelResolver
from citeformats.core.models import CitationRecord
from citeformats.formats import (
    BibtexBuilder,
    CitationFormat,
    EndNoteBuilder,
    PlainTextBuilder,
    RisBuilder,
)

if TYPE_CHECKING:
    from citeformats.config import CitationConfig

logger = logging.getLogger(__name__)

__all__ = ["CitationFormat", "CitationFormatsConverter"]


class CitationFormatsConverter:
    """Render citation records with one label resolver.

    The four builders are independent of each other; the converter only
    supplies them with the resolver and shared options.
    """

    def __init__(
        self,
        resolver: LabelResolver,
        *,
        file_name_requires_direct: bool = True,
    ):
        self.resolver = resolver
        self.plain = PlainTextBuilder(file_name_requires_direct)
        self.bibtex = BibtexBuilder(file_name_requires_direct)
        self.ris = RisBuilder(file_name_requires_direct)
        self.endnote = EndNoteBuilder(file_name_requires_direct)

    @classmethod
    def from_config(cls, config: "CitationConfig") -> "CitationFormatsConverter":
        """Create a converter using bundle labels from the configuration."""
        return cls(
            BundleLabelResolver(config.bundle_dir),
            file_name_requires_direct=config.file_name_requires_direct,
        )

    def to_string(
        self, record: CitationRecord, locale: str, escape_html: bool = False
    ) -> str:
        return self.plain.render(
            record, self.resolver, locale, escape_html=escape_html
        )

    def to_bibtex(self, record: CitationRecord, locale: str) -> str:
        return self.bibtex.render(record, self.resolver, locale)

    def to_ris(self, record: CitationRecord, locale: str) -> str:
        return self.ris.render(record, self.resolver, locale)

    def to_endnote(self, record: CitationRecord, locale: str) -> str:
        return self.endnote.render(record, self.resolver, locale)

    def render(
        self,
        record: CitationRecord,
        fmt: CitationFormat | str,
        locale: str,
        escape_html: bool = False,
    ) -> str:
        """Render the record in the given format.

        Args:
            record: Citation input
            fmt: Format or its name (citation, bibtex, ris, endnote)
            locale: Locale for labels
            escape_html: HTML-escape the plain citation; ignored otherwise

        Raises:
            UnsupportedFormatError: If the format is unknown.
        """
        fmt = parse_format(fmt)
        match fmt:
            case CitationFormat.CITATION:
                return self.to_string(record, locale, escape_html)
            case CitationFormat.BIBTEX:
                return self.to_bibtex(record, locale)
            case CitationFormat.RIS:
                return self.to_ris(record, locale)
            case CitationFormat.ENDNOTE:
                return self.to_endnote(record, locale)


def parse_format(fmt: CitationFormat | str) -> CitationFormat:
    if isinstance(fmt, CitationFormat):
        return fmt
    try:
        return CitationFormat(str(fmt).lower())
    except ValueError:
        raise UnsupportedFormatError(str(fmt)) from None
