"""Render dataset metadata as plain-text, BibTeX, RIS and EndNote citations."""

from citeformats.converter import CitationFormat, CitationFormatsConverter
from citeformats.core.labels import (
    BundleLabelResolver,
    LabelConstant,
    LabelResolver,
    MappingLabelResolver,
)
from citeformats.core.models import CitationRecord, Producer
from citeformats.core.pids import GlobalId

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "CitationFormat",
    "CitationFormatsConverter",
    "CitationRecord",
    "Producer",
    "GlobalId",
    "LabelConstant",
    "LabelResolver",
    "BundleLabelResolver",
    "MappingLabelResolver",
]
