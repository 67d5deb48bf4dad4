"""Derived values shared by every citation format.

All helpers are total over partially filled records: an absent value
becomes an empty string or a skipped fragment, never an exception.
"""

from .labels import LabelConstant, LabelResolver
from .models import CitationRecord
from .pids import GlobalId


class Labels:
    """Labels of one resolver bound to one locale."""

    def __init__(self, resolver: LabelResolver, locale: str):
        self.resolver = resolver
        self.locale = locale

    def __call__(self, constant: LabelConstant) -> str:
        """Return the label with its leading space, e.g. ``" [data]"``."""
        return " " + self.resolver.resolve(constant, self.locale)


def is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def join_nonblank(values, separator: str = ", ") -> str:
    """Join the non-blank values with ``separator``."""
    return separator.join(v for v in values if not is_blank(v))


def join_producers(record: CitationRecord, labels: Labels) -> str:
    label = labels(LabelConstant.PRODUCER) if record.producers else ""
    entries = []
    for producer in record.producers:
        if is_blank(producer.affiliation):
            entries.append(producer.name + label)
        else:
            entries.append(f"{producer.name}, {producer.affiliation}{label}")
    return ", ".join(entries)


def join_distributors(record: CitationRecord, labels: Labels) -> str:
    if not record.distributors:
        return ""
    label = labels(LabelConstant.DISTRIBUTOR)
    return ", ".join(d + label for d in record.distributors)


def publisher_name(record: CitationRecord, labels: Labels) -> str:
    """Root collection name with the publisher label, or empty."""
    if is_blank(record.root_dataverse_name):
        return ""
    return record.root_dataverse_name + labels(LabelConstant.PUBLISHER)


def publishing_data(record: CitationRecord, labels: Labels) -> str:
    """Compose producers, place, distributors, publisher and release year.

    Example:
        ``Producer 1, ABC [producer], Warsaw. Distributor 1 [distributor],
        Dataverse [publisher], 2021``
    """
    head = ""
    if record.producers:
        head = join_nonblank([join_producers(record, labels), record.production_place])

    tail = join_nonblank(
        [
            join_distributors(record, labels),
            publisher_name(record, labels),
            auxiliary_year(record),
        ]
    )
    return join_nonblank([head, tail], ". ")


def main_year(record: CitationRecord) -> str:
    if not is_blank(record.production_date):
        return record.production_date
    return record.release_year or ""


def auxiliary_year(record: CitationRecord) -> str:
    """Release year when the production date already serves as main year."""
    if not is_blank(record.production_date):
        return record.release_year or ""
    return ""


def citation_year(record: CitationRecord) -> str:
    """Main year, falling back to the record's canonical year."""
    year = main_year(record)
    return year if not is_blank(year) else record.year


def should_include_file_name(
    record: CitationRecord, require_direct: bool = True
) -> bool:
    """Whether file-level parts belong in the citation."""
    if is_blank(record.file_title):
        return False
    return record.is_direct or not require_direct


def pid_url(pid: GlobalId | None) -> str:
    if pid is None:
        return ""
    return pid.to_url() or ""


def pid_string(pid: GlobalId | None) -> str:
    return pid.as_string() if pid is not None else ""


def pid_doi(pid: GlobalId | None) -> str:
    """``authority/identifier`` of an identifier, or empty."""
    if pid is None:
        return ""
    return f"{pid.authority}/{pid.identifier}"


def has_publishing_data(record: CitationRecord) -> bool:
    return bool(record.producers or record.distributors)
