"""
Host accessors for file attribute flags.

An accessor exposes two primitives, read(path) and write(path, flags).
Both talk to the file system directly and keep no state, so every call
observes the current on-disk attributes.
"""

import os
import stat
import sys
from typing import Protocol

from .flags import FileAttributes


class AttributeAccessor(Protocol):
    """Read/write primitives over a file's attribute flag set."""

    def read(self, path: str) -> FileAttributes:
        ...

    def write(self, path: str, flags: FileAttributes) -> None:
        ...


class WindowsAttributeAccessor:
    """Native attributes through st_file_attributes and SetFileAttributesW."""

    def __init__(self):
        import ctypes
        from ctypes import wintypes

        self._ctypes = ctypes
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        self._set_attributes = kernel32.SetFileAttributesW
        self._set_attributes.argtypes = [wintypes.LPCWSTR, wintypes.DWORD]
        self._set_attributes.restype = wintypes.BOOL

    def read(self, path: str) -> FileAttributes:
        return FileAttributes(os.stat(path).st_file_attributes)

    def write(self, path: str, flags: FileAttributes) -> None:
        if not self._set_attributes(os.fspath(path), int(flags)):
            # WinError picks the OSError subclass from the saved error code
            raise self._ctypes.WinError(self._ctypes.get_last_error())


class PosixAttributeAccessor:
    """
    Attributes as far as a POSIX host exposes them.

    READONLY is the owner write permission bit being clear. Hosts with BSD
    file flags (macOS, FreeBSD) also expose ARCHIVE as SF_ARCHIVED and
    HIDDEN as UF_HIDDEN. Nothing else is reported or written.
    """

    WRITE_BITS = stat.S_IWUSR | stat.S_IWGRP | stat.S_IWOTH

    FLAG_MAP = {
        FileAttributes.ARCHIVE: stat.SF_ARCHIVED,
        FileAttributes.HIDDEN: stat.UF_HIDDEN,
    }

    def __init__(self):
        self.has_file_flags = hasattr(os, "chflags")

    @property
    def supported(self) -> FileAttributes:
        """Flags this host can represent."""
        flags = FileAttributes.READONLY
        if self.has_file_flags:
            for attr in self.FLAG_MAP:
                flags |= attr
        return flags

    def read(self, path: str) -> FileAttributes:
        st = os.stat(path)
        flags = FileAttributes.NONE

        if not st.st_mode & stat.S_IWUSR:
            flags |= FileAttributes.READONLY

        if self.has_file_flags:
            st_flags = getattr(st, "st_flags", 0)
            for attr, bit in self.FLAG_MAP.items():
                if st_flags & bit:
                    flags |= attr

        return flags

    def write(self, path: str, flags: FileAttributes) -> None:
        unsupported = int(flags) & ~int(self.supported)
        if unsupported:
            raise ValueError(f"Attributes not supported on this host: {FileAttributes(unsupported)!r}")

        st = os.stat(path)
        mode = stat.S_IMODE(st.st_mode)
        is_read_only = not mode & stat.S_IWUSR
        want_read_only = bool(flags & FileAttributes.READONLY)

        if want_read_only != is_read_only:
            if want_read_only:
                os.chmod(path, mode & ~self.WRITE_BITS)
            else:
                os.chmod(path, mode | stat.S_IWUSR)

        if self.has_file_flags:
            current = getattr(st, "st_flags", 0)
            updated = current
            for attr, bit in self.FLAG_MAP.items():
                if flags & attr:
                    updated |= bit
                else:
                    updated &= ~bit
            if updated != current:
                os.chflags(path, updated)


def default_accessor() -> AttributeAccessor:
    """Return the accessor for the running platform."""
    if sys.platform == "win32":
        return WindowsAttributeAccessor()
    return PosixAttributeAccessor()
