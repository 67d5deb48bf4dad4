"""Citation record model.

The citation record is the flat, already-resolved description of one
citation occasion: a dataset, or a single file within a dataset. It is
produced by the hosting repository and consumed unchanged by every
format builder.

Key components:
- Producer: name plus optional affiliation
- CitationRecord: immutable input to all citation builders
- load_record: read a record from a JSON or YAML document
"""

from datetime import date
from pathlib import Path
from typing import Any

import msgspec
import yaml

from .exceptions import InvalidIdentifierError, RecordFormatError
from .pids import GlobalId

_LITERAL_FIELDS = ("year", "release_year", "production_date", "version")


class Producer(msgspec.Struct, frozen=True, kw_only=True):
    """Dataset producer with an optional affiliation."""

    name: str
    affiliation: str | None = None


class CitationRecord(msgspec.Struct, frozen=True, kw_only=True):
    """Immutable citation input for one dataset or dataset file.

    Only ``authors``, ``title``, ``root_dataverse_name`` and ``year`` are
    expected to be populated for every record. All other fields may be
    empty and are then left out of the rendered citation.
    """

    title: str
    root_dataverse_name: str
    year: str
    authors: tuple[str, ...] = ()
    producers: tuple[Producer, ...] = ()
    distributors: tuple[str, ...] = ()
    other_ids: tuple[str, ...] = ()
    keywords: tuple[str, ...] = ()
    languages: tuple[str, ...] = ()
    file_title: str | None = None
    series_title: str | None = None
    production_place: str | None = None
    production_date: str | None = None
    release_year: str | None = None
    version: str | None = None
    unf: str | None = None
    pid_of_dataset: GlobalId | None = None
    pid_of_file: GlobalId | None = None
    is_direct: bool = False

    @property
    def persistent_id(self) -> GlobalId | None:
        """Alias for the dataset identifier."""
        return self.pid_of_dataset

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "CitationRecord":
        """Build a record from a decoded JSON/YAML mapping.

        Identifiers may be given as strings (``doi:10.18150/ZENON``) or as
        mappings with ``protocol``, ``authority`` and ``identifier`` keys.
        Producers may be mappings or ``[name, affiliation]`` pairs.

        Raises:
            RecordFormatError: If the mapping does not describe a record.
        """
        if not isinstance(data, dict):
            raise RecordFormatError("Citation record must be a mapping")

        data = dict(data)
        # YAML reads bare years and versions as numbers, and ISO dates as dates
        for field in _LITERAL_FIELDS:
            value = data.get(field)
            if isinstance(value, date):
                data[field] = value.isoformat()
            elif isinstance(value, int | float):
                data[field] = str(value)

        try:
            for field in ("pid_of_dataset", "pid_of_file"):
                if isinstance(data.get(field), str):
                    data[field] = msgspec.to_builtins(GlobalId.parse(data[field]))

            if data.get("producers") is not None:
                data["producers"] = _producer_entries(data["producers"])

            return msgspec.convert(data, cls)
        except InvalidIdentifierError as e:
            raise RecordFormatError(str(e)) from e
        except msgspec.ValidationError as e:
            raise RecordFormatError(f"Invalid citation record: {e}") from e


def _producer_entries(producers: Any) -> list[Any]:
    """Turn ``[name, affiliation]`` pairs into producer mappings."""
    if not isinstance(producers, list | tuple):
        raise RecordFormatError(
            f"Producers must be a list, got {type(producers).__name__}"
        )

    entries = []
    for producer in producers:
        if isinstance(producer, list | tuple):
            if not 1 <= len(producer) <= 2:
                raise RecordFormatError(
                    "Producer pairs must hold a name and an optional affiliation"
                )
            producer = {
                "name": producer[0],
                "affiliation": producer[1] if len(producer) > 1 else None,
            }
        entries.append(producer)
    return entries


def load_record(path: Path) -> CitationRecord:
    """Load a citation record from a ``.json``, ``.yaml`` or ``.yml`` file."""
    try:
        content = path.read_bytes()
    except OSError as e:
        raise RecordFormatError(f"Error reading record file: {e}") from e

    suffix = path.suffix.lower()
    try:
        if suffix == ".json":
            data = msgspec.json.decode(content)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(content)
        else:
            raise RecordFormatError(f"Unsupported record file type: {path.suffix}")
    except msgspec.DecodeError as e:
        raise RecordFormatError(f"Invalid JSON in record file: {e}") from e
    except yaml.YAMLError as e:
        raise RecordFormatError(f"Invalid YAML in record file: {e}") from e

    return CitationRecord.from_dict(data)
