"""
Lookup table store.

Loads the static JSON tables from the data directory on first use and
keeps them, read-only, for the life of the process:

- ``lookup-{from}-{to}.json``  headword -> entry, one per language pair
- ``dpd-i2h.json``            inflected form -> analysis tags
- ``dpd-deconstructor.json``  form -> "component + component"
- ``hanzi-variants.json``     optional, overrides the built-in variant map
- ``pali-endings.json``       optional, overrides the built-in ending rules

Every table may also be stored gzip-compressed (``.json.gz``).
Run ``scripts/fetch_dictionaries.py`` to download them.
"""

import gzip
import json
import re
from collections.abc import Mapping
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Self

import structlog

from config import settings
from services.data import HANZI_VARIANTS, PALI_ENDINGS, EndingRule

logger = structlog.get_logger()

INFLECTIONS = "dpd-i2h"
DECOMPOSITIONS = "dpd-deconstructor"
HANZI_VARIANTS_TABLE = "hanzi-variants"
ENDINGS_TABLE = "pali-endings"

_LANGUAGE_CODE = re.compile(r"^[a-z]{2,3}$")
_DICTIONARY_FILE = re.compile(r"^lookup-([a-z]{2,3})-([a-z]{2,3})\.json(?:\.gz)?$")


class LookupTableError(Exception):
    """Base class for table loading problems."""


class TableNotFoundError(LookupTableError):
    """The requested table does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Lookup table not found: {name}")
        self.name = name


class TableLoadError(LookupTableError):
    """The table exists but could not be read or decoded."""


def dictionary_name(from_lang: str, to_lang: str) -> str:
    for code in (from_lang, to_lang):
        if not _LANGUAGE_CODE.match(code or ""):
            raise TableNotFoundError(f"lookup-{from_lang}-{to_lang}")
    return f"lookup-{from_lang}-{to_lang}"


def _freeze(data: Any) -> Any:
    """Read-only view of a decoded table."""
    if isinstance(data, dict):
        return MappingProxyType(data)
    return tuple(data)


class LookupTables:
    """
    Process-wide cache of lookup tables.

    Tables are loaded lazily and kept by name. Two requests racing on the
    same cold table may both load it; the last one stored wins.
    """

    def __init__(self, data_dir: Path | str | None = None) -> None:
        self.data_dir = Path(data_dir) if data_dir else Path(settings.DATA_DIR)
        self._cache: dict[str, Any] = {}
        self._missing: set[str] = set()

    @classmethod
    @lru_cache(maxsize=1)
    def get_instance(cls) -> Self:
        """Get or create a singleton instance."""
        return cls()

    # ------------------------------------------------------------------
    # Loading
    # ------------------------------------------------------------------

    def _find(self, name: str) -> Path | None:
        for suffix in (".json", ".json.gz"):
            path = self.data_dir / f"{name}{suffix}"
            if path.is_file():
                return path
        return None

    def _read(self, path: Path) -> Any:
        try:
            if path.suffix == ".gz":
                with gzip.open(path, "rt", encoding="utf-8") as f:
                    return json.load(f)
            with open(path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            raise TableLoadError(f"Failed to load {path.name}: {e}") from e

    def load(self, name: str, shape: type = dict, values: type | None = None) -> Any:
        """
        Load a table by name, raising TableNotFoundError if absent.

        ``shape`` is the required top-level JSON type and ``values`` the
        required type of every entry; a mismatch raises TableLoadError.
        """
        if name in self._cache:
            return self._cache[name]

        path = self._find(name)
        if path is None:
            raise TableNotFoundError(name)

        data = self._read(path)
        if not isinstance(data, shape):
            raise TableLoadError(
                f"Unexpected top-level type in {path.name}: "
                f"{type(data).__name__} (expected {shape.__name__})"
            )
        if values is not None:
            entries = data.items() if isinstance(data, dict) else enumerate(data)
            for key, value in entries:
                if not isinstance(value, values):
                    raise TableLoadError(
                        f"Malformed entry {key!r} in {path.name}: "
                        f"{type(value).__name__} (expected {values.__name__})"
                    )

        table = _freeze(data)
        self._cache[name] = table
        logger.info("lookup_table_loaded", table=name, entries=len(table), path=str(path))
        return table

    def load_optional(self, name: str, shape: type = dict, values: type | None = None) -> Any | None:
        """Load a table by name, or return None if it does not exist."""
        if name in self._missing:
            return None
        try:
            return self.load(name, shape, values)
        except TableNotFoundError:
            self._missing.add(name)
            logger.warning("lookup_table_missing", table=name, data_dir=str(self.data_dir))
            return None

    # ------------------------------------------------------------------
    # Tables
    # ------------------------------------------------------------------

    def dictionary(self, from_lang: str, to_lang: str) -> MappingProxyType:
        """Headword -> entry table for a language pair (required)."""
        return self.load(dictionary_name(from_lang, to_lang), dict, dict)

    def optional_dictionary(self, from_lang: str, to_lang: str) -> MappingProxyType | None:
        try:
            return self.dictionary(from_lang, to_lang)
        except TableNotFoundError:
            return None

    def inflections(self) -> MappingProxyType | None:
        return self.load_optional(INFLECTIONS, dict, list)

    def deconstructions(self) -> MappingProxyType | None:
        return self.load_optional(DECOMPOSITIONS, dict, str)

    def hanzi_variants(self) -> Mapping[str, str]:
        """Variant map from the data directory, else the built-in one."""
        if HANZI_VARIANTS_TABLE not in self._cache:
            if self._find(HANZI_VARIANTS_TABLE) is None:
                self._cache[HANZI_VARIANTS_TABLE] = MappingProxyType(HANZI_VARIANTS)
            else:
                self.load(HANZI_VARIANTS_TABLE, dict, str)
        return self._cache[HANZI_VARIANTS_TABLE]

    def endings(self) -> tuple[EndingRule, ...]:
        """Ending rules from the data directory, else the built-in ones."""
        cache_key = f"{ENDINGS_TABLE}:rules"
        if cache_key not in self._cache:
            if self._find(ENDINGS_TABLE) is None:
                rules = PALI_ENDINGS
            else:
                try:
                    rules = tuple(
                        EndingRule(str(suffix), int(keep), int(min_length), str(replacement))
                        for suffix, keep, min_length, replacement in self.load(ENDINGS_TABLE, list, list)
                    )
                except (TypeError, ValueError) as e:
                    raise TableLoadError(f"Malformed ending rule in {ENDINGS_TABLE}: {e}") from e
            self._cache[cache_key] = rules
        return self._cache[cache_key]

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    def available_pairs(self) -> list[tuple[str, str]]:
        """Language pairs with a dictionary file in the data directory."""
        if not self.data_dir.is_dir():
            return []
        pairs = set()
        for path in self.data_dir.iterdir():
            match = _DICTIONARY_FILE.match(path.name)
            if match:
                pairs.add((match.group(1), match.group(2)))
        return sorted(pairs)

    def has_table(self, name: str) -> bool:
        return name in self._cache or self._find(name) is not None

    def clear(self) -> None:
        self._cache.clear()
        self._missing.clear()
