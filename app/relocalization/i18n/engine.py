"""Resolution engine for per-client, per-locale translated text.

Owns the client registry and the per-locale catalogue table, loads
catalogues lazily on first lookup (or eagerly at registration), and resolves
keys with a requested locale -> default locale -> raw key fallback chain.

The catalogue table holds one catalogue per locale shared by all clients:
loading a locale for one client replaces whatever another client loaded for
that locale before.
"""

from pathlib import Path
from typing import Dict, Optional, Tuple

from relocalization.i18n.loader import CatalogueLoader, YAMLCatalogueLoader
from relocalization.i18n.models import (
    CatalogueLoadStatus,
    Locale,
    TranslationCatalogue,
)
from relocalization.i18n.paths import PathResolver
from relocalization.i18n.registry import ClientRegistry
from relocalization.logging import get_module_logger

logger = get_module_logger()


class LocalizationEngine:
    """Registers clients, loads their catalogues and resolves text.

    Not thread-safe; every call runs to completion on the caller's thread.

    Attributes:
        path_resolver: Maps a client id to its catalogue directory.
        loader: Reads a catalogue file.
        registry: Registered clients and their loaded locales.
        lazy_load: When False, registering a client loads every locale.
        log_load: When True, per-file load attempts are logged.
        default_locale: Fallback locale for missing keys.
        builtin_client_id: The engine's own client; missing files for it are
            not reported.
        file_extension: Extension of catalogue files, without the dot.
    """

    def __init__(
        self,
        path_resolver: PathResolver,
        loader: Optional[CatalogueLoader] = None,
        *,
        lazy_load: bool = True,
        log_load: bool = True,
        default_locale: Locale = Locale.EN,
        current_locale: Optional[Locale] = None,
        builtin_client_id: Optional[str] = "relocalization",
        file_extension: str = "yml",
    ):
        self.path_resolver = path_resolver
        self.loader = loader or YAMLCatalogueLoader()
        self.registry = ClientRegistry()
        self.lazy_load = lazy_load
        self.log_load = log_load
        self.default_locale = default_locale
        self.current_locale = current_locale or default_locale
        self.builtin_client_id = builtin_client_id
        self.file_extension = file_extension.lstrip(".")
        self._catalogues: Dict[Locale, TranslationCatalogue] = {}
        logger.info(
            "initialized_localization_engine",
            lazy_load=lazy_load,
            log_load=log_load,
            default_locale=default_locale.value,
        )

    # Registration

    def register_client(self, client_id: str) -> None:
        """Register a client whose keys can then be resolved.

        Loads every locale for the client right away when lazy loading is
        disabled.

        Raises:
            DuplicateClientError: If ``client_id`` is already registered.
        """
        self.registry.register(client_id)
        logger.info("client_registered", client_id=client_id)
        if not self.lazy_load:
            self.reload_client(client_id)

    def list_clients(self) -> Tuple[str, ...]:
        """Registered client ids, in registration order."""
        return self.registry.list_clients()

    def is_loaded(self, client_id: str, locale: Locale) -> bool:
        return self.registry.is_loaded(client_id, locale)

    # Loading

    def catalogue_path(self, client_id: str, locale: Locale) -> Path:
        """File holding ``client_id``'s catalogue for ``locale``."""
        base_dir = Path(self.path_resolver.resolve(client_id))
        return base_dir / f"{locale.value}.{self.file_extension}"

    def reload_client(self, client_id: str) -> None:
        """Load (or reload) every locale for one client.

        Raises:
            ClientNotFoundError: If ``client_id`` was never registered.
        """
        self.registry.get(client_id)
        for locale in Locale:
            self.load_for(client_id, locale)

    def load_for(self, client_id: str, locale: Locale) -> CatalogueLoadStatus:
        """Load one client's catalogue for one locale.

        The client's loaded state is cleared before anything is read, so a
        failed reload never leaves a stale claim behind. A successful load
        replaces the shared catalogue for ``locale``; a missing, empty or
        malformed file leaves the table untouched.

        Returns:
            The status reported by the loader.

        Raises:
            ClientNotFoundError: If ``client_id`` was never registered.
        """
        state = self.registry.get(client_id)
        state.set_loaded(locale, False)

        path = self.catalogue_path(client_id, locale)
        log = logger.bind(client_id=client_id, locale=locale.value, path=str(path))

        if not path.is_file():
            if self.log_load and client_id != self.builtin_client_id:
                log.warning("catalogue_not_found")
            return CatalogueLoadStatus.NOT_FOUND

        result = self.loader.load(path)
        if not result.is_loaded:
            # Empty or malformed; the loader has already reported why
            if self.log_load:
                log.warning("catalogue_not_loaded", status=result.status.value)
            return result.status

        catalogue = result.catalogue
        catalogue.locale = locale
        self._catalogues[locale] = catalogue
        state.set_loaded(locale, True)

        if self.log_load:
            log.info("catalogue_loaded", entry_count=len(catalogue))
        return result.status

    def reload_all(self, force: bool = False) -> None:
        """Load every locale for every client.

        Expensive; meant as a diagnostic last resort rather than part of
        normal operation. Without ``force`` only (client, locale) pairs that
        are not loaded yet are read.
        """
        logger.warning(
            "reloading_all_catalogues",
            force=force,
            client_count=len(self.registry),
        )
        for locale in Locale:
            self._load_locale(locale, force)

    def ensure_locale_loaded(self, locale: Locale) -> None:
        """Load ``locale`` for all clients if no catalogue is cached for it."""
        if locale not in self._catalogues:
            self._load_locale(locale, force=False)

    def _load_locale(self, locale: Locale, force: bool) -> None:
        for state in self.registry:
            if force or not state.is_loaded(locale):
                self.load_for(state.client_id, locale)

    def get_catalogue(self, locale: Locale) -> Optional[TranslationCatalogue]:
        """Cached catalogue for ``locale``, without triggering a load."""
        return self._catalogues.get(locale)

    def loaded_locales(self) -> Tuple[Locale, ...]:
        """Locales that currently have a cached catalogue."""
        return tuple(locale for locale in Locale if locale in self._catalogues)

    # Resolution

    def resolve(self, key: str, locale: Optional[Locale] = None) -> Optional[str]:
        """Look up ``key`` without reporting misses.

        Tries the requested locale (the current locale when omitted), then
        the default locale.

        Returns:
            The translated text, or None when neither catalogue has the key.
        """
        locale = locale or self.current_locale

        value = self._lookup(key, locale)
        if value is None and locale != self.default_locale:
            value = self._lookup(key, self.default_locale)
        return value

    def _lookup(self, key: str, locale: Locale) -> Optional[str]:
        self.ensure_locale_loaded(locale)
        catalogue = self._catalogues.get(locale)
        return catalogue.get_entry(key) if catalogue else None

    def get_text(self, key: str, locale: Optional[Locale] = None) -> str:
        """Translated text for ``key``, falling back to ``key`` itself.

        Args:
            key: Localization key.
            locale: Locale to translate to; the current locale when omitted.

        Returns:
            Text for the requested locale if present, else text for the
            default locale, else ``key``.
        """
        locale = locale or self.current_locale
        value = self.resolve(key, locale)
        if value is not None:
            return value

        if locale == self.default_locale:
            logger.error(
                "translation_not_found",
                key=key,
                locale=locale.value,
                reason=f"default locale file '{locale.value}.{self.file_extension}' has no entry for key",
            )
        else:
            logger.error(
                "translation_not_found",
                key=key,
                locale=locale.value,
                fallback_locale=self.default_locale.value,
                reason=(
                    f"neither '{locale.value}.{self.file_extension}' nor default "
                    "locale file has an entry for key"
                ),
            )
        return key
