"""Localized labels used inside citations.

Citations decorate a few values with a short bracketed label, e.g. the
dataset title is followed by ``[data]``. Builders ask a ``LabelResolver``
for the label of a ``LabelConstant`` in a given locale; the resolver
returns the bracketed label without a leading space and builders insert
that space themselves.
"""

import logging
from collections.abc import Mapping
from enum import Enum, unique
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Protocol

import yaml

from .exceptions import LabelNotFoundError

logger = logging.getLogger(__name__)

DEFAULT_BUNDLE_DIR = Path(__file__).parent / "bundles"


@unique
class LabelConstant(Enum):
    """Labels a citation may contain."""

    DATA = "data"
    PUBLISHER = "publisher"
    PRODUCER = "producer"
    DISTRIBUTOR = "distributor"
    FILE_NAME = "file_name"


class LabelResolver(Protocol):
    """Resolve a label constant to its bracketed text for a locale."""

    def resolve(self, constant: LabelConstant, locale: str) -> str:
        """Return e.g. ``"[data]"`` for ``DATA`` in English."""
        ...


class MappingLabelResolver:
    """Resolver backed by an in-memory ``{locale: {constant: label}}`` map.

    Labels are stored exactly as returned, brackets included.
    """

    def __init__(self, labels: Mapping[str, Mapping[LabelConstant, str]]):
        self._labels = {locale: dict(values) for locale, values in labels.items()}

    def resolve(self, constant: LabelConstant, locale: str) -> str:
        try:
            return self._labels[locale][constant]
        except KeyError:
            raise LabelNotFoundError(constant.value, locale) from None

    @property
    def locales(self) -> list[str]:
        return sorted(self._labels)


class BundleLabelResolver:
    """Resolver reading YAML bundles named ``<locale>.yaml``.

    Bundles hold bare words (``data: data``); the resolver brackets them.
    A regional locale such as ``pl_PL`` falls back to its language bundle
    ``pl``. There is no fallback to another language: a missing key or
    bundle raises ``LabelNotFoundError``.
    """

    def __init__(self, bundle_dir: Path | None = None):
        self.bundle_dir = Path(bundle_dir) if bundle_dir else DEFAULT_BUNDLE_DIR

    def resolve(self, constant: LabelConstant, locale: str) -> str:
        for candidate in _locale_candidates(locale):
            bundle = _load_bundle(self.bundle_dir, candidate)
            word = bundle.get(constant.value)
            if word:
                return f"[{word}]"
        raise LabelNotFoundError(constant.value, locale)

    @property
    def locales(self) -> list[str]:
        """Locales with a bundle file in the bundle directory."""
        if not self.bundle_dir.is_dir():
            return []
        return sorted(path.stem for path in self.bundle_dir.glob("*.yaml"))


def _locale_candidates(locale: str) -> list[str]:
    normalized = locale.replace("-", "_")
    candidates = [normalized]
    if "_" in normalized:
        candidates.append(normalized.split("_", 1)[0])
    return candidates


@lru_cache(maxsize=64)
def _load_bundle(bundle_dir: Path, locale: str) -> Mapping[str, str]:
    path = bundle_dir / f"{locale}.yaml"
    if not path.exists():
        return MappingProxyType({})

    logger.debug("Loading label bundle %s", path)
    with open(path, encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Label bundle {path} must be a mapping")

    return MappingProxyType({str(k): str(v) for k, v in data.items()})
