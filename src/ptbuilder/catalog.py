"""
PTBuilder Catalog - Valid Device Models, Module Models and Link Types

PURPOSE:
    Loads the Packet Tracer Builder reference data once from a TOML asset and
    answers membership and listing questions for the validator and the
    session. The asset maps identifier strings to the numeric type id the
    Builder uses internally.

WHO READS ME:
    - validate.py: lookup() for model and link type checks
    - session.py: listing() for list_catalog
    - main.py: Catalog.load() during bootstrap

WHO I READ:
    - models.py: CatalogError, ShapeError

DEPENDENCIES:
    - serde: TOML deserialization into CatalogData
    - importlib.resources: locate the packaged data/catalog.toml
    - types.MappingProxyType: read-only mappings

KEY EXPORTS:
    - CatalogKind: devices, modules, links
    - CatalogEntry: a present lookup result
    - CatalogListing: sorted, filtered and truncated key listing
    - Catalog: the immutable catalog

FILE FORMAT:
    ```toml
    [devices]
    "2811" = 0
    "PC-PT" = 8

    [modules]
    "HWIC-2T" = 1

    [links]
    "Copper Straight-Through" = 8100
    ```
"""

import importlib.resources as pkg_resources
import logging
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Mapping

from serde import SerdeError, deserialize, serialize
from serde.toml import from_toml

from ptbuilder.models import CatalogError, ShapeError

_LOGGER = logging.getLogger(__name__)

CATALOG_RESOURCE = "data/catalog.toml"
MAX_LIST_LIMIT = 500


class CatalogKind(str, Enum):
    """the three catalog mappings"""

    DEVICES = "devices"
    MODULES = "modules"
    LINKS = "links"

    @classmethod
    def parse(cls, value) -> "CatalogKind":
        try:
            return cls(value)
        except ValueError:
            choices = ", ".join(kind.value for kind in cls)
            raise ShapeError(f"kind must be one of {choices}, got {value!r}") from None


@deserialize
@dataclass
class CatalogData:
    """raw TOML layout of the catalog asset"""

    devices: dict[str, int] = field(default_factory=dict)
    modules: dict[str, int] = field(default_factory=dict)
    links: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class CatalogEntry:
    kind: CatalogKind
    key: str
    type_id: int


@serialize(rename_all="camelcase")
@dataclass
class CatalogListing:
    """result of a catalog listing"""

    kind: str
    total_known: int
    returned: int
    entries: list[str]


class Catalog:
    """Read-only reference data.

    Keys are matched exactly (case-sensitive) for lookups, listing filters
    on a case-insensitive prefix.
    """

    def __init__(
        self,
        devices: Mapping[str, int],
        modules: Mapping[str, int],
        links: Mapping[str, int],
    ):
        self._maps = {
            CatalogKind.DEVICES: MappingProxyType(dict(devices)),
            CatalogKind.MODULES: MappingProxyType(dict(modules)),
            CatalogKind.LINKS: MappingProxyType(dict(links)),
        }

    @classmethod
    def from_toml(cls, text: str) -> "Catalog":
        try:
            data = from_toml(CatalogData, text)
        except (TypeError, ValueError, SerdeError) as exc:
            raise CatalogError(f"malformed catalog: {exc}") from exc
        return cls(data.devices, data.modules, data.links)

    @classmethod
    def load(cls, filename: str | None = None) -> "Catalog":
        """load the catalog from the given file or from the packaged asset"""
        try:
            if filename:
                with open(filename, encoding="utf-8") as handle:
                    text = handle.read()
                source = filename
            else:
                resource = pkg_resources.files("ptbuilder").joinpath(CATALOG_RESOURCE)
                text = resource.read_text(encoding="utf-8")
                source = f"ptbuilder/{CATALOG_RESOURCE}"
        except OSError as exc:
            raise CatalogError(f"cannot read catalog: {exc}") from exc
        catalog = cls.from_toml(text)
        _LOGGER.info(
            "Catalog loaded from %s: %d devices, %d modules, %d links",
            source,
            catalog.count(CatalogKind.DEVICES),
            catalog.count(CatalogKind.MODULES),
            catalog.count(CatalogKind.LINKS),
        )
        return catalog

    def mapping(self, kind) -> Mapping[str, int]:
        return self._maps[CatalogKind.parse(kind)]

    def lookup(self, kind, key: str) -> CatalogEntry | None:
        """return the entry for key, None if the catalog does not know it"""
        kind = CatalogKind.parse(kind)
        type_id = self._maps[kind].get(key)
        if type_id is None:
            return None
        return CatalogEntry(kind=kind, key=key, type_id=type_id)

    def has(self, kind, key: str) -> bool:
        return self.lookup(kind, key) is not None

    def keys(self, kind) -> list[str]:
        return list(self.mapping(kind))

    def count(self, kind) -> int:
        return len(self.mapping(kind))

    def listing(self, kind, limit: int = 200, starts_with: str = "") -> CatalogListing:
        """sorted keys of one mapping, filtered by a case-insensitive prefix"""
        kind = CatalogKind.parse(kind)
        if isinstance(limit, bool) or not isinstance(limit, int):
            raise ShapeError(f"limit must be an integer, got {type(limit).__name__}")
        if not 1 <= limit <= MAX_LIST_LIMIT:
            raise ShapeError(f"limit must be between 1 and {MAX_LIST_LIMIT}, got {limit}")
        if not isinstance(starts_with, str):
            raise ShapeError("startsWith must be a string")

        prefix = starts_with.lower()
        keys = self._maps[kind]
        entries = sorted(
            (key for key in keys if key.lower().startswith(prefix)),
            key=lambda key: (key.casefold(), key),
        )[:limit]
        return CatalogListing(
            kind=kind.value,
            total_known=len(keys),
            returned=len(entries),
            entries=entries,
        )
