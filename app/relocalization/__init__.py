"""ReLocalization - lazy, per-client YAML localization engine.

Subpackages:
- configuration: pydantic settings for the localization engine
- logging: structlog configuration and module loggers
- i18n: locales, catalogues, loaders and the resolution engine
"""

__version__ = "1.0.0"
