"""Catalogue path resolution.

A path resolver maps a client id to the directory holding that client's
catalogue files. The engine appends ``<locale>.<extension>``.
"""

from pathlib import Path
from typing import Protocol, Union, runtime_checkable


@runtime_checkable
class PathResolver(Protocol):
    """Maps a client id to its catalogue directory.

    Implementations must be deterministic and free of side effects.
    """

    def resolve(self, client_id: str) -> Path: ...


class ClientDirectoryResolver:
    """Resolves ``<root>/<client_id>/<folder_name>``.

    Attributes:
        root: Directory containing one folder per client.
        folder_name: Sub-folder holding the catalogue files.
    """

    def __init__(self, root: Union[str, Path], folder_name: str = "Localization"):
        self.root = Path(root)
        self.folder_name = folder_name

    def resolve(self, client_id: str) -> Path:
        return self.root / client_id / self.folder_name

    def __repr__(self) -> str:
        return f"ClientDirectoryResolver(root={str(self.root)!r}, folder_name={self.folder_name!r})"
