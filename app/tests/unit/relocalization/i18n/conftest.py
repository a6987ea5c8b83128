"""Feature-level fixtures for localization engine tests.

Builds a plugins root with catalogue files for a few clients:
- alpha: en.yml, fr.yml
- beta: en.yml only
"""

import pytest

from relocalization.i18n import Locale
from tests.factories.i18n import make_engine, write_catalogue


@pytest.fixture
def populated_root(catalogue_root):
    """Plugins root with catalogues for clients alpha and beta."""
    write_catalogue(
        catalogue_root,
        "alpha",
        Locale.EN,
        {
            "greeting": "Hello",
            "farewell": "Goodbye",
            "menu.title": "Main menu",
        },
    )
    write_catalogue(
        catalogue_root,
        "alpha",
        Locale.FR,
        {
            "greeting": "Bonjour",
            "menu.title": "Menu principal",
        },
    )
    write_catalogue(catalogue_root, "beta", Locale.EN, {"beta.only": "Beta text"})
    return catalogue_root


@pytest.fixture
def engine(populated_root):
    """Lazy engine over the populated root with nothing registered."""
    return make_engine(populated_root)


@pytest.fixture
def alpha_engine(engine):
    """Lazy engine with client alpha registered."""
    engine.register_client("alpha")
    return engine
