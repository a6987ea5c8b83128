"""Localization service for dependency injection.

Provides a class-based interface to the engine for easier DI and testing.
"""

from typing import Optional, Tuple, Union

from relocalization.i18n.engine import LocalizationEngine
from relocalization.i18n.factory import create_localization_engine
from relocalization.i18n.models import Locale


class LocalizationService:
    """Thin facade over a LocalizationEngine.

    Exposes the host-facing operations only and accepts locale codes as
    plain strings.

    Usage:
        service = LocalizationService()
        service.register_client("my.mod")
        title = service.get_text("menu.title", "fr")
    """

    def __init__(self, engine: Optional[LocalizationEngine] = None):
        """Initialize localization service.

        Args:
            engine: Optional pre-configured engine. If not provided, creates
                a default one via the factory.
        """
        self._engine = engine or create_localization_engine()

    def register_client(self, client_id: str) -> None:
        """Register a client.

        Raises:
            DuplicateClientError: If the client is already registered.
        """
        self._engine.register_client(client_id)

    def get_text(self, key: str, locale: Union[Locale, str, None] = None) -> str:
        """Translated text for ``key``, or ``key`` when no catalogue has it.

        Raises:
            ValueError: If ``locale`` is an unsupported code.
        """
        return self._engine.get_text(key, self._coerce(locale))

    def reload_client(self, client_id: str) -> None:
        self._engine.reload_client(client_id)

    def reload_all(self, force: bool = False) -> None:
        self._engine.reload_all(force)

    def list_clients(self) -> Tuple[str, ...]:
        return self._engine.list_clients()

    def set_locale(self, locale: Union[Locale, str]) -> None:
        """Change the locale used when lookups do not name one."""
        self._engine.current_locale = self._coerce(locale)

    @property
    def engine(self) -> LocalizationEngine:
        """Access the underlying engine."""
        return self._engine

    @staticmethod
    def _coerce(locale: Union[Locale, str, None]) -> Optional[Locale]:
        if locale is None or isinstance(locale, Locale):
            return locale
        return Locale.from_string(locale)
