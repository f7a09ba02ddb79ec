"""
Shared library plugin loader.

Opens a compiled plugin with ctypes and reads the metadata it exports
through its C symbols (plugin_get_required_api_version and friends).
"""

import ctypes
from pathlib import Path
from typing import Optional

from .base import BasePluginHandle, BasePluginLoader, PluginInfo
from ..utils.logger import get_logger

logger = get_logger(__name__)


REQUIRED_API_VERSION_SYMBOL = "plugin_get_required_api_version"

# Optional metadata symbols, keyed by PluginInfo field
INFO_SYMBOLS = {
    'name': "plugin_get_name",
    'version': "plugin_get_version",
    'description': "plugin_get_description",
    'contact': "plugin_get_contact",
}


def _read_string(library: ctypes.CDLL, symbol: str) -> Optional[str]:
    """Call a `const char *fn(void)` export, or return None if it's missing."""
    try:
        func = getattr(library, symbol)
    except AttributeError:
        return None

    func.argtypes = []
    func.restype = ctypes.c_char_p
    value = func()
    if value is None:
        return None
    return value.decode('utf-8', errors='replace')


class SharedLibraryPluginHandle(BasePluginHandle):
    """Plugin opened from a shared object."""

    def __init__(self, path: Path | str, library: ctypes.CDLL):
        super().__init__(path)
        self._library = library

    def info(self) -> PluginInfo:
        required = _read_string(self._library, REQUIRED_API_VERSION_SYMBOL)
        if required is None:
            raise LookupError(f"plugin does not declare a required API version: {self.path}")

        fields = {
            field_name: _read_string(self._library, symbol)
            for field_name, symbol in INFO_SYMBOLS.items()
        }
        return PluginInfo(required_api_version=required, **fields)


class SharedLibraryPluginLoader(BasePluginLoader):
    """
    Loader for plugins compiled as shared libraries.

    ctypes never calls dlclose, so every opened library stays mapped for
    the life of the process even after its handle is dropped. Batch
    callers that open many plugins should run in a short-lived process.
    """

    def __init__(self, mode: int = ctypes.RTLD_LOCAL):
        self.mode = mode

    @property
    def loader_name(self) -> str:
        return "shared_library"

    def open(self, path: Path | str) -> SharedLibraryPluginHandle:
        """
        Open a plugin shared library.

        Raises:
            OSError: If the library can't be found or loaded
            LookupError: If the library doesn't export the plugin API
        """
        path = Path(path)
        logger.debug(f"Loading plugin library: {path}")

        # Existing files load by absolute path, anything else (a soname such
        # as "libc.so.6") goes through the linker search path
        target = str(path.resolve()) if path.exists() else str(path)
        library = ctypes.CDLL(target, mode=self.mode)

        if not hasattr(library, REQUIRED_API_VERSION_SYMBOL):
            raise LookupError(
                f"{path} is not a plugin: missing symbol {REQUIRED_API_VERSION_SYMBOL}"
            )

        return SharedLibraryPluginHandle(path, library)
