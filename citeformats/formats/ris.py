"""RIS (Research Information Systems) citation records.

RIS is a tagged line format: each line is a two-letter tag, two spaces,
a dash and a space, then the value. A record starts with ``TY`` and ends
with an empty ``ER`` line.
"""

import logging

from citeformats.core.helpers import (
    Labels,
    citation_year,
    has_publishing_data,
    pid_doi,
    pid_url,
    publishing_data,
)
from citeformats.core.labels import LabelConstant, LabelResolver
from citeformats.core.models import CitationRecord

from .base import CitationBuilder, CitationFormat

logger = logging.getLogger(__name__)

LINE_END = "\r\n"

# Dataset reference type
RECORD_TYPE = "DATA"


def ris_line(tag: str, value: str) -> str:
    return f"{tag}  - {value}"


class RisBuilder(CitationBuilder):
    """Build an RIS record."""

    format = CitationFormat.RIS

    def render(
        self, record: CitationRecord, resolver: LabelResolver, locale: str
    ) -> str:
        logger.debug("Rendering RIS for %r (%s)", record.title, locale)
        labels = Labels(resolver, locale)
        pid = record.pid_of_dataset

        lines = [ris_line("TY", RECORD_TYPE)]
        lines.extend(ris_line("AU", author) for author in record.authors)
        lines.append(ris_line("T1", record.title + labels(LabelConstant.DATA)))
        if self.include_file_name(record):
            lines.append(ris_line("T2", record.file_title))
        lines.extend(ris_line("LA", language) for language in record.languages)
        lines.append(ris_line("PY", citation_year(record) + "///"))

        if pid is not None:
            lines.append(ris_line("DO", pid_doi(pid)))
            lines.append(ris_line("UR", pid_url(pid)))
        if record.version:
            lines.append(ris_line("ET", record.version))
        if has_publishing_data(record):
            lines.append(ris_line("PB", publishing_data(record, labels)))

        lines.append(ris_line("ER", ""))
        return LINE_END.join(lines)
