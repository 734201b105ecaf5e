"""Kernel name → platform tag.

- ``Linux``, ``Darwin`` → posix
- ``Msys``, ``Cygwin`` (and the ``MSYS_NT-*``/``MINGW*_NT-*``/``CYGWIN_NT-*``
  strings those shells report, or ``Windows`` from a native interpreter) → win32
- anything else → unknown
"""

from __future__ import annotations

import platform as _platform

from ytmp3_setup.types import Platform

_POSIX = {"linux", "darwin"}
_WIN32 = {"msys", "cygwin", "windows"}
_WIN32_PREFIXES = ("msys_nt", "mingw", "cygwin_nt")


def kernel_name() -> str:
    return _platform.system()


def detect_platform(kernel: str | None = None) -> Platform:
    name = (kernel_name() if kernel is None else kernel).strip().lower()
    if name in _POSIX:
        return Platform.POSIX
    if name in _WIN32 or name.startswith(_WIN32_PREFIXES):
        return Platform.WIN32
    return Platform.UNKNOWN
