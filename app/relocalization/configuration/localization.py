"""Localization engine settings."""

from typing import Optional

from pydantic import Field, field_validator

from relocalization.configuration.base import InfrastructureSettings


class LocalizationSettings(InfrastructureSettings):
    """Catalogue loading and resolution configuration.

    Locale fields hold plain locale codes; they are parsed into
    ``relocalization.i18n.Locale`` when the engine is built.

    Environment Variables:
        LOCALIZATION_LAZY_LOAD: Defer loading until first lookup (default: True)
        LOCALIZATION_LOG_LOAD: Log every per-file load attempt (default: True)
        LOCALIZATION_ROOT_DIR: Directory holding one folder per client
        LOCALIZATION_FOLDER_NAME: Folder inside each client directory
        LOCALIZATION_FILE_EXTENSION: Catalogue file extension (default: yml)
        LOCALIZATION_DEFAULT_LOCALE: Fallback locale code (default: en)
        LOCALIZATION_CURRENT_LOCALE: Selected locale code (default: fallback)
        LOCALIZATION_BUILTIN_CLIENT_ID: Client id of the engine itself

    Example:
        ```python
        from relocalization.configuration import settings

        if not settings.localization.LAZY_LOAD:
            # Registration will eager-load every locale...
        ```
    """

    LAZY_LOAD: bool = Field(default=True, alias="LOCALIZATION_LAZY_LOAD")
    LOG_LOAD: bool = Field(default=True, alias="LOCALIZATION_LOG_LOAD")
    ROOT_DIR: str = Field(default="plugins", alias="LOCALIZATION_ROOT_DIR")
    FOLDER_NAME: str = Field(default="Localization", alias="LOCALIZATION_FOLDER_NAME")
    FILE_EXTENSION: str = Field(default="yml", alias="LOCALIZATION_FILE_EXTENSION")
    DEFAULT_LOCALE: str = Field(default="en", alias="LOCALIZATION_DEFAULT_LOCALE")
    CURRENT_LOCALE: Optional[str] = Field(
        default=None, alias="LOCALIZATION_CURRENT_LOCALE"
    )
    BUILTIN_CLIENT_ID: str = Field(
        default="relocalization", alias="LOCALIZATION_BUILTIN_CLIENT_ID"
    )

    @field_validator("DEFAULT_LOCALE", "CURRENT_LOCALE", mode="before")
    @classmethod
    def normalize_locale_code(cls, v):
        """Lower-case locale codes; treat blank values as unset."""
        if v is None:
            return None
        if isinstance(v, str):
            v = v.strip().lower()
            return v or None
        return v

    @field_validator("FILE_EXTENSION", mode="before")
    @classmethod
    def strip_extension_dot(cls, v):
        """Allow the extension to be given with a leading dot."""
        if isinstance(v, str):
            return v.strip().lstrip(".")
        return v

    @property
    def selected_locale(self) -> str:
        """Locale code used when a lookup does not name one."""
        return self.CURRENT_LOCALE or self.DEFAULT_LOCALE
