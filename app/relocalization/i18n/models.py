"""Localization models.

Defines locales, translation catalogues and catalogue load results.
"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Iterator, Optional


class Locale(str, Enum):
    """Supported locale identifiers.

    Declaration order is stable: each member's position is its ``index``
    and its bit in a client's loaded mask. At most 32 members.
    """

    EN = "en"
    RU = "ru"
    ZH = "zh"
    KO = "ko"
    FR = "fr"
    DE = "de"
    ES = "es"
    PT = "pt"
    JA = "ja"
    IT = "it"
    PL = "pl"
    TR = "tr"
    UK = "uk"

    def __str__(self) -> str:
        return self.value

    @classmethod
    def default(cls) -> "Locale":
        """Fallback-of-last-resort locale."""
        return cls.EN

    @classmethod
    def from_string(cls, locale_str: str) -> "Locale":
        """Convert a locale code to a Locale.

        Args:
            locale_str: Locale code (e.g., "en", "FR").

        Returns:
            Matching Locale enum value.

        Raises:
            ValueError: If the code is not supported.
        """
        try:
            return cls(locale_str.strip().lower())
        except (AttributeError, ValueError) as e:
            raise ValueError(f"Unsupported locale: {locale_str}") from e

    @property
    def index(self) -> int:
        """Position of this locale in declaration order."""
        return list(type(self)).index(self)

    @property
    def bit(self) -> int:
        """Bit representing this locale in a loaded mask."""
        return 1 << self.index


@dataclass
class TranslationCatalogue:
    """Translations for a single locale.

    Attributes:
        locale: The Locale this catalogue is for, if known.
        entries: Flat mapping of translation key to text.
        source: File the entries were read from.
        loaded_at: Timestamp (ISO 8601) when the file was read.
    """

    locale: Optional[Locale] = None
    entries: Dict[str, str] = field(default_factory=dict)
    source: Optional[Path] = None
    loaded_at: Optional[str] = None

    def get_entry(self, key: str) -> Optional[str]:
        """Return the text for ``key``, or None if absent."""
        return self.entries.get(key)

    def set_entry(self, key: str, value: str) -> None:
        """Set the text for ``key``; later calls win."""
        self.entries[key] = value

    def has_entry(self, key: str) -> bool:
        return key in self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self.entries)


class CatalogueLoadStatus(str, Enum):
    """Outcome of reading a catalogue file."""

    LOADED = "loaded"
    NOT_FOUND = "not_found"
    EMPTY = "empty"
    MALFORMED = "malformed"


@dataclass(frozen=True)
class CatalogueLoadResult:
    """Catalogue produced by a loader plus the outcome of the read.

    Non-LOADED results always carry an empty catalogue.
    """

    catalogue: TranslationCatalogue
    status: CatalogueLoadStatus

    @property
    def is_loaded(self) -> bool:
        return self.status is CatalogueLoadStatus.LOADED
