"""BibTeX citation records.

Datasets are exported as a single ``@misc`` entry keyed by the dataset
identifier and year. Lines end with CRLF so the record imports cleanly
into reference managers on every platform.
"""

import logging

from citeformats.core.helpers import (
    Labels,
    citation_year,
    has_publishing_data,
    pid_doi,
    pid_string,
    pid_url,
    publishing_data,
)
from citeformats.core.labels import LabelConstant, LabelResolver
from citeformats.core.models import CitationRecord

from .base import CitationBuilder, CitationFormat

logger = logging.getLogger(__name__)

LINE_END = "\r\n"


class BibtexValueEscaper:
    """Escape text for use inside a braced BibTeX value.

    Braces are escaped so they cannot unbalance the surrounding value,
    and straight double quotes become TeX quotes (````...''``).
    """

    SPECIAL_CHARS = {
        "\\": "\\\\",
        "{": "\\{",
        "}": "\\}",
        "$": "\\$",
        "&": "\\&",
        "#": "\\#",
        "_": "\\_",
        "%": "\\%",
        "~": "\\~{}",
        "^": "\\^{}",
    }

    def escape(self, text: str) -> str:
        if not text:
            return text

        result = text
        for char, escaped in self.SPECIAL_CHARS.items():
            result = result.replace(char, escaped)
        return self._quotes(result)

    def _quotes(self, text: str) -> str:
        parts = text.split('"')
        result = [parts[0]]
        for i, part in enumerate(parts[1:]):
            result.append("``" if i % 2 == 0 else "''")
            result.append(part)
        return "".join(result)


class BibtexBuilder(CitationBuilder):
    """Build a BibTeX ``@misc`` record."""

    format = CitationFormat.BIBTEX

    def __init__(self, file_name_requires_direct: bool = True):
        super().__init__(file_name_requires_direct)
        self.escaper = BibtexValueEscaper()

    def render(
        self, record: CitationRecord, resolver: LabelResolver, locale: str
    ) -> str:
        logger.debug("Rendering BibTeX for %r (%s)", record.title, locale)
        labels = Labels(resolver, locale)
        pid = record.pid_of_dataset
        identifier = pid.identifier if pid is not None else ""

        fields: list[tuple[str, str]] = [("author", " and ".join(record.authors))]
        if pid is not None:
            fields.append(("doi", pid_doi(pid)))
        if record.version:
            fields.append(("edition", record.version))
        if record.keywords:
            fields.append(("keywords", ", ".join(record.keywords)))
        if has_publishing_data(record):
            fields.append(("publisher", publishing_data(record, labels)))

        title = record.title + labels(LabelConstant.DATA)
        fields.append(("title", self.escaper.escape(title)))
        fields.append(("url", pid_url(pid)))
        fields.append(("year", citation_year(record)))

        note = self._note(record, labels)
        if note:
            fields.append(("note", note))

        lines = [f"@misc{{{identifier}_{record.year},{LINE_END}"]
        lines.extend(f"{key} = {{{value}}},{LINE_END}" for key, value in fields)
        lines.append(f"}}{LINE_END}")
        return "".join(lines)

    def _note(self, record: CitationRecord, labels: Labels) -> str:
        segments = []
        if record.version:
            segments.append(f"Edition: {record.version}")
        if self.include_file_name(record):
            file_part = record.file_title + labels(LabelConstant.FILE_NAME)
            if record.pid_of_file is not None:
                file_part += f", {pid_string(record.pid_of_file)}"
            segments.append(file_part)
        return "; ".join(segments)
