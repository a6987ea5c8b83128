"""Client registry and per-client load state.

Tracks which clients are registered and, for each, which locales have a
successfully loaded catalogue.
"""

from dataclasses import dataclass, field
from typing import Dict, Iterator, Set, Tuple

from relocalization.i18n.exceptions import ClientNotFoundError, DuplicateClientError
from relocalization.i18n.models import Locale


@dataclass
class ClientState:
    """Load state for one registered client.

    Attributes:
        client_id: Unique client identifier.
        loaded_locales: Locales whose most recent load found a file and
            produced at least one entry.
    """

    client_id: str
    loaded_locales: Set[Locale] = field(default_factory=set)

    @property
    def loaded_mask(self) -> int:
        """Loaded locales packed into an integer, one bit per Locale.index."""
        mask = 0
        for locale in self.loaded_locales:
            mask |= locale.bit
        return mask

    def is_loaded(self, locale: Locale) -> bool:
        return locale in self.loaded_locales

    def set_loaded(self, locale: Locale, loaded: bool) -> None:
        if loaded:
            self.loaded_locales.add(locale)
        else:
            self.loaded_locales.discard(locale)


class ClientRegistry:
    """Registered clients keyed by id, in registration order.

    Clients are never removed.
    """

    def __init__(self):
        self._clients: Dict[str, ClientState] = {}

    def register(self, client_id: str) -> ClientState:
        """Add a client with nothing loaded.

        Raises:
            DuplicateClientError: If ``client_id`` is already registered.
        """
        if client_id in self._clients:
            raise DuplicateClientError(client_id)
        state = ClientState(client_id=client_id)
        self._clients[client_id] = state
        return state

    def get(self, client_id: str) -> ClientState:
        """Return the state for ``client_id``.

        Raises:
            ClientNotFoundError: If the client was never registered.
        """
        try:
            return self._clients[client_id]
        except KeyError:
            raise ClientNotFoundError(client_id) from None

    def list_clients(self) -> Tuple[str, ...]:
        return tuple(self._clients)

    def is_loaded(self, client_id: str, locale: Locale) -> bool:
        return self.get(client_id).is_loaded(locale)

    def set_loaded(self, client_id: str, locale: Locale, loaded: bool) -> None:
        self.get(client_id).set_loaded(locale, loaded)

    def __contains__(self, client_id: object) -> bool:
        return client_id in self._clients

    def __len__(self) -> int:
        return len(self._clients)

    def __iter__(self) -> Iterator[ClientState]:
        return iter(list(self._clients.values()))
