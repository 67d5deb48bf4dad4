"""Cross-format properties over many combinations of optional fields."""

import itertools
import xml.etree.ElementTree as ET

import msgspec
import pytest

from citeformats.converter import CitationFormat, CitationFormatsConverter
from citeformats.core.models import Producer
from citeformats.core.pids import GlobalId


OPTIONAL_FIELDS = {
    "producers": (Producer(name="Prod", affiliation="Aff"),),
    "distributors": ("Dist",),
    "keywords": ("kw",),
    "languages": ("english",),
    "version": "V3",
    "pid_of_dataset": GlobalId.parse("hdl:1902.1/00012"),
    "production_date": "1999",
    "file_title": "data.tab",
}


def variants(base):
    """Every subset of the optional fields applied to ``base``."""
    names = list(OPTIONAL_FIELDS)
    for flags in itertools.product([False, True], repeat=len(names)):
        changes = {
            name: OPTIONAL_FIELDS[name] for name, on in zip(names, flags) if on
        }
        yield msgspec.structs.replace(base, is_direct=True, **changes)


@pytest.fixture
def converter(resolver):
    return CitationFormatsConverter(resolver)


@pytest.fixture
def minimal_record(harvested_record):
    return msgspec.structs.replace(harvested_record, pid_of_dataset=None)


def render_all(converter, record, locale="en"):
    return {
        fmt: converter.render(record, fmt, locale)
        for fmt in CitationFormat
    }


class TestCitationProperties:
    """Properties that hold for all records."""

    def test_endnote_always_well_formed(self, converter, minimal_record):
        for record in variants(minimal_record):
            document = converter.to_endnote(record, "en")
            root = ET.fromstring(document.encode("utf-8"))
            assert root.tag == "xml"

    def test_no_file_parts_without_file_title(self, converter, full_record):
        record = msgspec.structs.replace(
            full_record,
            is_direct=True,
            pid_of_file=GlobalId.parse("doi:10.18150/ZENON_F"),
        )

        for fmt, output in render_all(converter, record).items():
            assert "[file name]" not in output, fmt
            assert "ZENON_F" not in output, fmt
            assert "T2  - " not in output
            assert "secondary-title" not in output

    def test_author_order_preserved(self, converter, full_record):
        record = msgspec.structs.replace(
            full_record, authors=("Zeta, Z.", "Alpha, A.", "Mu, M.")
        )

        outputs = render_all(converter, record)

        for output in outputs.values():
            positions = [output.index(a) for a in record.authors]
            assert positions == sorted(positions)

    def test_rendering_is_idempotent(self, converter, file_record):
        first = render_all(converter, file_record)
        second = render_all(converter, file_record)

        assert first == second
        assert converter.to_string(file_record, "en", True) == converter.to_string(
            file_record, "en", True
        )

    def test_bibtex_and_ris_use_crlf(self, converter, minimal_record):
        for record in variants(minimal_record):
            for output in (
                converter.to_bibtex(record, "en"),
                converter.to_ris(record, "en"),
            ):
                assert "\n" not in output.replace("\r\n", "")

    def test_ris_terminates_with_er(self, converter, minimal_record):
        for record in variants(minimal_record):
            ris = converter.to_ris(record, "en")
            assert ris.startswith("TY  - DATA\r\n")
            assert ris.endswith("\r\nER  - ")

    def test_no_literal_none(self, converter, minimal_record):
        for record in variants(minimal_record):
            for output in render_all(converter, record).values():
                assert "None" not in output
                assert "null" not in output

    def test_locale_changes_only_labels(
        self, converter, file_record, english_labels, polish_labels
    ):
        english = render_all(converter, file_record, "en")
        polish = render_all(converter, file_record, "pl")

        for fmt in CitationFormat:
            translated = polish[fmt]
            for constant, label in polish_labels.items():
                translated = translated.replace(label, english_labels[constant])
            assert translated == english[fmt], fmt
            assert polish[fmt] != english[fmt]
