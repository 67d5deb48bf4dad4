"""Human-readable citation text."""

import html
import logging

from citeformats.core.fragments import FragmentList
from citeformats.core.helpers import (
    Labels,
    citation_year,
    join_distributors,
    join_nonblank,
    join_producers,
    pid_string,
    pid_url,
    publisher_name,
)
from citeformats.core.labels import LabelConstant, LabelResolver
from citeformats.core.models import CitationRecord

from .base import CitationBuilder, CitationFormat

logger = logging.getLogger(__name__)


def html_escape(text: str) -> str:
    """Escape ``& < > "`` as HTML entities."""
    return html.escape(text, quote=False).replace('"', "&quot;")


class PlainTextBuilder(CitationBuilder):
    """Build the display citation sentence.

    Example:
        ``Author, A.: Title [data]. Producer [producer], Warsaw, 2001.
        Distributor [distributor], Dataverse [publisher], 2001.
        https://doi.org/10.18150/ZENON, V1``
    """

    format = CitationFormat.CITATION

    def render(
        self,
        record: CitationRecord,
        resolver: LabelResolver,
        locale: str,
        escape_html: bool = False,
    ) -> str:
        logger.debug("Rendering citation text for %r (%s)", record.title, locale)
        labels = Labels(resolver, locale)
        esc = _escaper(escape_html)
        include_file = self.include_file_name(record)

        citation = FragmentList()
        citation.add(esc("; ".join(record.authors)), ": ")
        emphasize_title = include_file and escape_html
        citation.add(self._title(record, labels, esc, emphasize_title), ". ")

        if record.producers:
            citation.add(
                esc(
                    join_nonblank(
                        [
                            join_producers(record, labels),
                            record.production_place,
                            record.production_date,
                        ]
                    )
                ),
                ". ",
            )

        citation.add(esc(join_nonblank(record.other_ids)), ". ")
        citation.add(
            esc(
                join_nonblank(
                    [
                        join_distributors(record, labels),
                        publisher_name(record, labels),
                        citation_year(record),
                    ]
                )
            ),
            ". ",
        )

        url = pid_url(record.pid_of_dataset)
        if url and escape_html:
            url = f'<a href="{esc(url)}" target="_blank">{esc(url)}</a>'
        citation.add(url, ", ")
        citation.add(esc(record.version or ""), ". ")

        if include_file:
            citation.add(
                esc(record.file_title + labels(LabelConstant.FILE_NAME)), ", "
            )
            citation.add(esc(pid_string(record.pid_of_file)))

        return citation.join()

    def _title(self, record, labels, esc, emphasize) -> str:
        if not record.title:
            return ""
        title = esc(record.title)
        if emphasize:
            title = f"<i>{title}</i>"
        return title + esc(labels(LabelConstant.DATA))


def _escaper(enabled: bool):
    if enabled:
        return html_escape
    return lambda text: text
