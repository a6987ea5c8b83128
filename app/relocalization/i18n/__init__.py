"""Localization engine - lazily loaded, per-client YAML catalogues.

Main components:
- models: Locale, TranslationCatalogue, CatalogueLoadStatus, CatalogueLoadResult
- loader: CatalogueLoader and YAMLCatalogueLoader
- paths: PathResolver and ClientDirectoryResolver
- registry: ClientRegistry and ClientState
- engine: LocalizationEngine with lazy loading and locale fallback
- factory: create_localization_engine from settings
- service: LocalizationService facade
"""

from relocalization.i18n.models import (
    CatalogueLoadResult,
    CatalogueLoadStatus,
    Locale,
    TranslationCatalogue,
)
from relocalization.i18n.exceptions import (
    ClientNotFoundError,
    DuplicateClientError,
    LocalizationError,
)
from relocalization.i18n.loader import CatalogueLoader, YAMLCatalogueLoader
from relocalization.i18n.paths import ClientDirectoryResolver, PathResolver
from relocalization.i18n.registry import ClientRegistry, ClientState
from relocalization.i18n.engine import LocalizationEngine
from relocalization.i18n.factory import create_localization_engine
from relocalization.i18n.service import LocalizationService

__all__ = [
    "Locale",
    "TranslationCatalogue",
    "CatalogueLoadStatus",
    "CatalogueLoadResult",
    "LocalizationError",
    "DuplicateClientError",
    "ClientNotFoundError",
    "CatalogueLoader",
    "YAMLCatalogueLoader",
    "PathResolver",
    "ClientDirectoryResolver",
    "ClientRegistry",
    "ClientState",
    "LocalizationEngine",
    "create_localization_engine",
    "LocalizationService",
]
