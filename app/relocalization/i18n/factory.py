"""Factory functions for creating localization components.

Builds a LocalizationEngine from LocalizationSettings.
"""

from pathlib import Path
from typing import Optional, Union

from relocalization.configuration import LocalizationSettings, settings
from relocalization.i18n.engine import LocalizationEngine
from relocalization.i18n.loader import YAMLCatalogueLoader
from relocalization.i18n.models import Locale
from relocalization.i18n.paths import ClientDirectoryResolver
from relocalization.logging import get_module_logger

logger = get_module_logger()


def create_localization_engine(
    localization_settings: Optional[LocalizationSettings] = None,
    root_dir: Union[str, Path, None] = None,
    register_builtin: bool = True,
) -> LocalizationEngine:
    """Create and configure a LocalizationEngine.

    Args:
        localization_settings: Settings to build from (default: the
            ``localization`` section of the settings singleton).
        root_dir: Directory holding one folder per client; overrides
            ``ROOT_DIR``.
        register_builtin: Register the engine's own client id.

    Returns:
        LocalizationEngine: Configured engine

    Raises:
        ValueError: If a configured locale code is not supported.

    Usage:
        # Use settings from the environment
        engine = create_localization_engine()

        # Custom client root, nothing pre-registered
        engine = create_localization_engine(
            root_dir=Path("/opt/game/plugins"), register_builtin=False
        )
    """
    config = localization_settings or settings.localization
    root = Path(root_dir) if root_dir is not None else Path(config.ROOT_DIR)

    default_locale = Locale.from_string(config.DEFAULT_LOCALE)
    current_locale = (
        Locale.from_string(config.CURRENT_LOCALE) if config.CURRENT_LOCALE else None
    )

    engine = LocalizationEngine(
        path_resolver=ClientDirectoryResolver(root, config.FOLDER_NAME),
        loader=YAMLCatalogueLoader(),
        lazy_load=config.LAZY_LOAD,
        log_load=config.LOG_LOAD,
        default_locale=default_locale,
        current_locale=current_locale,
        builtin_client_id=config.BUILTIN_CLIENT_ID,
        file_extension=config.FILE_EXTENSION,
    )

    if register_builtin:
        engine.register_client(config.BUILTIN_CLIENT_ID)

    logger.info(
        "localization_engine_created",
        root_dir=str(root),
        lazy_load=config.LAZY_LOAD,
        current_locale=engine.current_locale.value,
    )
    return engine
