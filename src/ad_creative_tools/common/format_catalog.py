"""FormatCatalog - ordered, read-only registry of ad formats."""

import json
import logging
from collections.abc import Iterable, Iterator, Mapping
from os import PathLike
from pathlib import Path
from typing import Final

from pydantic import TypeAdapter

from .errors import FormatNotFoundError
from .schemas import AdFormat

logger = logging.getLogger(__name__)

DEFAULT_AD_FORMATS: Final[tuple[AdFormat, ...]] = (
    AdFormat(id="fb-ig-square", name="FB/IG Square", width=1080, height=1080),
    AdFormat(id="ig-story", name="IG Story/TikTok", width=1080, height=1920),
    AdFormat(id="linkedin-banner", name="LinkedIn Banner", width=1200, height=628),
)

_FORMAT_LIST = TypeAdapter(list[AdFormat])


class FormatCatalog:
    """Fixed, ordered list of AdFormat entries keyed by unique id.

    Order is significant: batch generation emits assets in catalog order,
    regardless of the order formats were selected in.

    Example:
        catalog = default_catalog()
        story = catalog.get("ig-story")
        chosen = catalog.resolve({"ig-story", "fb-ig-square"})
    """

    def __init__(self, formats: Iterable[AdFormat]):
        self._formats: tuple[AdFormat, ...] = tuple(formats)
        if not self._formats:
            raise ValueError("A format catalog needs at least one format")

        self._by_id: dict[str, AdFormat] = {}
        for ad_format in self._formats:
            if ad_format.id in self._by_id:
                raise ValueError(f"Duplicate ad format id: '{ad_format.id}'")
            self._by_id[ad_format.id] = ad_format

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> "FormatCatalog":
        return cls(_FORMAT_LIST.validate_python(list(records)))

    @classmethod
    def from_json(cls, path: str | PathLike[str]) -> "FormatCatalog":
        """Load a catalog from a JSON array of ``{id, name, width, height}`` objects."""
        with open(Path(path), encoding="utf-8") as f:
            records = json.load(f)
        if not isinstance(records, list):
            raise ValueError(f"Format catalog must be a JSON array: {path}")
        catalog = cls.from_records(records)
        logger.info(f"Loaded {len(catalog)} ad formats from {path}")
        return catalog

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    @property
    def formats(self) -> tuple[AdFormat, ...]:
        return self._formats

    @property
    def ids(self) -> list[str]:
        return [f.id for f in self._formats]

    def get(self, format_id: str) -> AdFormat:
        try:
            return self._by_id[format_id]
        except KeyError:
            raise FormatNotFoundError(format_id) from None

    def resolve(self, format_ids: Iterable[str]) -> list[AdFormat]:
        """Return the known formats among ``format_ids``, in catalog order.

        Unknown ids are skipped, not reported as errors.
        """
        wanted = set(format_ids)
        unknown = wanted.difference(self._by_id)
        if unknown:
            logger.debug(f"Skipping unknown ad format ids: {sorted(unknown)}")
        return [f for f in self._formats if f.id in wanted]

    def __iter__(self) -> Iterator[AdFormat]:
        return iter(self._formats)

    def __len__(self) -> int:
        return len(self._formats)

    def __contains__(self, format_id: object) -> bool:
        return format_id in self._by_id


def default_catalog() -> FormatCatalog:
    return FormatCatalog(DEFAULT_AD_FORMATS)
