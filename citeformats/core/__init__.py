"""Citation record model, labels and shared rendering primitives."""

from citeformats.core.exceptions import (
    CitationError,
    CitationRenderError,
    InvalidIdentifierError,
    LabelNotFoundError,
    RecordFormatError,
    UnsupportedFormatError,
    XmlWriterError,
)
from citeformats.core.fragments import Fragment, FragmentList
from citeformats.core.labels import (
    BundleLabelResolver,
    LabelConstant,
    LabelResolver,
    MappingLabelResolver,
)
from citeformats.core.models import CitationRecord, Producer, load_record
from citeformats.core.pids import GlobalId
from citeformats.core.xmlwriter import TagWriter

__all__ = [
    # Models
    "CitationRecord",
    "Producer",
    "GlobalId",
    "load_record",
    # Labels
    "LabelConstant",
    "LabelResolver",
    "BundleLabelResolver",
    "MappingLabelResolver",
    # Rendering primitives
    "Fragment",
    "FragmentList",
    "TagWriter",
    # Exceptions
    "CitationError",
    "CitationRenderError",
    "InvalidIdentifierError",
    "LabelNotFoundError",
    "RecordFormatError",
    "UnsupportedFormatError",
    "XmlWriterError",
]
