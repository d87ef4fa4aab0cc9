"""Runtime environment detection."""

from __future__ import annotations

import sys
from enum import Enum


class Environment(str, Enum):
    """Runtime family deciding which multipart strategy is used."""

    SERVER = "server"
    BROWSER = "browser"


def detect_environment() -> Environment:
    """Return BROWSER when running inside a browser WebAssembly runtime.

    Pyodide and similar runtimes report ``sys.platform == "emscripten"`` and
    expose browser globals through the ``js`` module. Web workers have no
    ``window`` global and count as SERVER.
    """
    if sys.platform != "emscripten":
        return Environment.SERVER

    try:
        import js  # type: ignore[import-not-found]
    except ImportError:
        return Environment.SERVER

    if hasattr(js, "window"):
        return Environment.BROWSER
    return Environment.SERVER
