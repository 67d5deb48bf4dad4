"""EndNote XML citation documents.

The document follows the EndNote ``<xml><records><record>`` layout with
reference type 59 (Dataset). Markup is produced by ``TagWriter`` so every
conditional branch leaves a balanced element tree.
"""

import io
import logging
from collections.abc import Callable
from typing import TextIO

from citeformats.core.exceptions import CitationRenderError, XmlWriterError
from citeformats.core.helpers import (
    Labels,
    citation_year,
    has_publishing_data,
    pid_url,
    publishing_data,
)
from citeformats.core.labels import LabelConstant, LabelResolver
from citeformats.core.models import CitationRecord
from citeformats.core.xmlwriter import TagWriter

from .base import CitationBuilder, CitationFormat

logger = logging.getLogger(__name__)

DATASET_REF_TYPE = "59"


class EndNoteBuilder(CitationBuilder):
    """Build an EndNote XML document."""

    format = CitationFormat.ENDNOTE

    def __init__(
        self,
        file_name_requires_direct: bool = True,
        stream_factory: Callable[[], TextIO] = io.StringIO,
    ):
        """Initialize builder.

        Args:
            file_name_requires_direct: See ``CitationBuilder``
            stream_factory: Creates the in-memory buffer for one document;
                it must support ``getvalue()``
        """
        super().__init__(file_name_requires_direct)
        self.stream_factory = stream_factory

    def render(
        self, record: CitationRecord, resolver: LabelResolver, locale: str
    ) -> str:
        """Render the record as an EndNote XML document.

        Raises:
            CitationRenderError: If the document could not be written.
        """
        logger.debug("Rendering EndNote XML for %r (%s)", record.title, locale)
        labels = Labels(resolver, locale)
        try:
            with TagWriter(self.stream_factory()) as xml:
                self._write_document(xml, record, labels)
                return xml.getvalue()
        except (XmlWriterError, OSError, UnicodeError) as e:
            logger.error("Error occurred while creating EndNote XML", exc_info=True)
            raise CitationRenderError(self.format.value, e) from e

    def _write_document(
        self, xml: TagWriter, record: CitationRecord, labels: Labels
    ) -> None:
        pid = record.pid_of_dataset

        xml.start_document()
        xml.start_tag("xml").start_tag("records").start_tag("record")

        xml.start_tag("ref-type").attribute("name", "Dataset")
        xml.text(DATASET_REF_TYPE).end_tag()

        xml.start_tag("contributors")
        xml.collection("authors", "author", record.authors)
        xml.end_tag()  # contributors

        xml.start_tag("titles")
        xml.element("title", record.title + labels(LabelConstant.DATA))
        if self.include_file_name(record):
            xml.element(
                "secondary-title",
                record.file_title + labels(LabelConstant.FILE_NAME),
            )
        xml.end_tag()  # titles

        xml.collection("keywords", "keyword", record.keywords)

        xml.start_tag("dates").element("year", citation_year(record)).end_tag()

        if has_publishing_data(record):
            xml.element("publisher", publishing_data(record, labels))
        if record.version:
            xml.element("edition", record.version)

        xml.collection(None, "language", record.languages)

        if pid is not None:
            xml.start_tag("urls").start_tag("web-urls")
            xml.element("url", pid_url(pid))
            xml.end_tag().end_tag()  # web-urls, urls
            xml.element(
                "electronic-resource-num",
                f"{pid.protocol}/{pid.authority}/{pid.identifier}",
            )

        xml.end_tag().end_tag().end_tag()  # record, records, xml
        xml.end_document()
