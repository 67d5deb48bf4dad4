"""Pytest configuration and shared citation fixtures."""

import os

import msgspec
import pytest

from citeformats.core.labels import LabelConstant, MappingLabelResolver
from citeformats.core.models import CitationRecord, Producer
from citeformats.core.pids import GlobalId

ENGLISH_LABELS = {
    LabelConstant.DATA: "[data]",
    LabelConstant.PUBLISHER: "[publisher]",
    LabelConstant.PRODUCER: "[producer]",
    LabelConstant.DISTRIBUTOR: "[distributor]",
    LabelConstant.FILE_NAME: "[file name]",
}

POLISH_LABELS = {
    LabelConstant.DATA: "[dane]",
    LabelConstant.PUBLISHER: "[wydawca]",
    LabelConstant.PRODUCER: "[producent]",
    LabelConstant.DISTRIBUTOR: "[dystrybutor]",
    LabelConstant.FILE_NAME: "[nazwa pliku]",
}


@pytest.fixture(autouse=True)
def isolate_environment(monkeypatch):
    """Isolate environment variables for each test.

    This prevents test pollution where one test's environment
    changes affect other tests.
    """
    original_env = os.environ.copy()

    yield

    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def english_labels() -> dict[LabelConstant, str]:
    return dict(ENGLISH_LABELS)


@pytest.fixture
def polish_labels() -> dict[LabelConstant, str]:
    return dict(POLISH_LABELS)


@pytest.fixture
def resolver(english_labels, polish_labels) -> MappingLabelResolver:
    """Label resolver with English and Polish labels."""
    return MappingLabelResolver({"en": english_labels, "pl": polish_labels})


@pytest.fixture
def full_record() -> CitationRecord:
    """Locally deposited dataset with every dataset-level field filled."""
    return CitationRecord(
        authors=("Author, The First", "Author, The Second"),
        producers=(
            Producer(name="Producer 1", affiliation="ABC"),
            Producer(name="Producer 2", affiliation="BCD"),
        ),
        distributors=("Distributor 1", "Distributor 2"),
        other_ids=("OtherId1", "OtherId2", "OtherId3"),
        keywords=("Keyword I", "Keyword II"),
        languages=("polish", "italian"),
        title="Title",
        production_place="Warsaw",
        production_date="2001",
        root_dataverse_name="Dataverse",
        release_year="2021",
        year="2019",
        pid_of_dataset=GlobalId.parse("doi:10.18150/ZENON"),
        version="V1",
    )


@pytest.fixture
def harvested_record() -> CitationRecord:
    """Harvested dataset with the reduced field set."""
    return CitationRecord(
        authors=("Author, The First", "Author, The Second"),
        title="Title",
        root_dataverse_name="Harvested",
        year="2019",
        pid_of_dataset=GlobalId.parse("doi:10.18150/ZENON"),
    )


@pytest.fixture
def file_record(full_record) -> CitationRecord:
    """Citation of a directly accessed file of the full dataset."""
    return msgspec.structs.replace(
        full_record,
        file_title="File Name",
        pid_of_file=GlobalId.parse("doi:10.18150/ZENON_F"),
        is_direct=True,
    )
