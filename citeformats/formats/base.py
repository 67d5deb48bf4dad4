"""Common interface of the citation format builders."""

from abc import ABC, abstractmethod
from enum import Enum, unique

from citeformats.core.helpers import should_include_file_name
from citeformats.core.labels import LabelResolver
from citeformats.core.models import CitationRecord


@unique
class CitationFormat(Enum):
    """Supported citation formats."""

    CITATION = "citation"
    BIBTEX = "bibtex"
    RIS = "ris"
    ENDNOTE = "endnote"

    @property
    def media_type(self) -> str:
        return _MEDIA_TYPES[self]

    @property
    def extension(self) -> str:
        return _EXTENSIONS[self]


_MEDIA_TYPES = {
    CitationFormat.CITATION: "text/plain",
    CitationFormat.BIBTEX: "text/x-bibtex",
    CitationFormat.RIS: "application/x-research-info-systems",
    CitationFormat.ENDNOTE: "text/xml",
}

_EXTENSIONS = {
    CitationFormat.CITATION: "txt",
    CitationFormat.BIBTEX: "bib",
    CitationFormat.RIS: "ris",
    CitationFormat.ENDNOTE: "xml",
}


class CitationBuilder(ABC):
    """Render a citation record in one format.

    Builders hold configuration only; every render call works on its own
    local state, so one builder may serve concurrent callers.
    """

    format: CitationFormat

    def __init__(self, file_name_requires_direct: bool = True):
        """Initialize builder.

        Args:
            file_name_requires_direct: Only include file-level parts for
                citations of a directly accessed file.
        """
        self.file_name_requires_direct = file_name_requires_direct

    @abstractmethod
    def render(
        self, record: CitationRecord, resolver: LabelResolver, locale: str
    ) -> str:
        """Render the record.

        Args:
            record: Citation input
            resolver: Source of localized labels
            locale: Locale passed to the resolver

        Returns:
            Rendered citation text
        """
        pass

    def include_file_name(self, record: CitationRecord) -> bool:
        return should_include_file_name(
            record, require_direct=self.file_name_requires_direct
        )
