"""Catalogue loading interface and implementations.

Defines the contract for turning a catalogue file into a
TranslationCatalogue and provides the YAML-based loader.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path

import yaml

from relocalization.i18n.models import (
    CatalogueLoadResult,
    CatalogueLoadStatus,
    TranslationCatalogue,
)
from relocalization.logging import get_module_logger

logger = get_module_logger()


class CatalogueLoader(ABC):
    """Abstract base for catalogue loaders.

    Implementations map a file path to a catalogue. They never raise for
    missing or unusable files; the outcome is reported in the result status.
    """

    @abstractmethod
    def load(self, path: Path) -> CatalogueLoadResult:
        """Load a catalogue from ``path``.

        Args:
            path: Catalogue file to read.

        Returns:
            CatalogueLoadResult with the catalogue and load status.
        """
        pass


class YAMLCatalogueLoader(CatalogueLoader):
    """Loader for flat YAML catalogue files.

    Expected format, one top-level mapping of key to text:

        greeting: Hello
        farewell: Goodbye

    Scalars are read with ``yaml.BaseLoader`` so values stay plain strings
    ("yes" is not turned into True). Duplicate keys resolve to the last
    occurrence.

    Attributes:
        encoding: Text encoding of catalogue files.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    def load(self, path: Path) -> CatalogueLoadResult:
        path = Path(path)
        if not path.is_file():
            return self._empty(path, CatalogueLoadStatus.NOT_FOUND)

        try:
            with open(path, "r", encoding=self.encoding) as f:
                # Only the first document of a multi-document stream is used
                data = next(yaml.load_all(f, Loader=yaml.BaseLoader), None)
        except yaml.YAMLError as e:
            logger.error("catalogue_parse_error", path=str(path), error=str(e))
            return self._empty(path, CatalogueLoadStatus.MALFORMED)
        except (OSError, UnicodeDecodeError) as e:
            logger.error("catalogue_read_error", path=str(path), error=str(e))
            return self._empty(path, CatalogueLoadStatus.MALFORMED)

        if not data:
            logger.error("catalogue_empty", path=str(path))
            return self._empty(path, CatalogueLoadStatus.EMPTY)

        if not isinstance(data, dict):
            logger.error(
                "invalid_catalogue_format",
                path=str(path),
                expected="mapping",
                actual=type(data).__name__,
            )
            return self._empty(path, CatalogueLoadStatus.MALFORMED)

        catalogue = TranslationCatalogue(
            source=path,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        for key, value in data.items():
            if not isinstance(value, str):
                logger.warning(
                    "invalid_catalogue_entry",
                    path=str(path),
                    key=key,
                    expected="string",
                )
                continue
            catalogue.set_entry(key, value)

        if not catalogue:
            logger.error("catalogue_empty", path=str(path))
            return self._empty(path, CatalogueLoadStatus.EMPTY)

        return CatalogueLoadResult(catalogue, CatalogueLoadStatus.LOADED)

    @staticmethod
    def _empty(path: Path, status: CatalogueLoadStatus) -> CatalogueLoadResult:
        return CatalogueLoadResult(TranslationCatalogue(source=path), status)
