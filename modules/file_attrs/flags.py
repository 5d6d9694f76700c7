"""
Attribute flag set for the file_attrs module.

Member values are the host's own FILE_ATTRIBUTE_* bits, so a value read
from the file system can be compared and masked without translation.
"""

import stat
from enum import IntFlag
from typing import Iterable, Union


class FileAttributes(IntFlag):
    """Boolean file properties maintained by the host file system."""
    NONE = 0
    READONLY = stat.FILE_ATTRIBUTE_READONLY
    HIDDEN = stat.FILE_ATTRIBUTE_HIDDEN
    SYSTEM = stat.FILE_ATTRIBUTE_SYSTEM
    DIRECTORY = stat.FILE_ATTRIBUTE_DIRECTORY
    ARCHIVE = stat.FILE_ATTRIBUTE_ARCHIVE
    DEVICE = stat.FILE_ATTRIBUTE_DEVICE
    NORMAL = stat.FILE_ATTRIBUTE_NORMAL
    TEMPORARY = stat.FILE_ATTRIBUTE_TEMPORARY
    SPARSE_FILE = stat.FILE_ATTRIBUTE_SPARSE_FILE
    REPARSE_POINT = stat.FILE_ATTRIBUTE_REPARSE_POINT
    COMPRESSED = stat.FILE_ATTRIBUTE_COMPRESSED
    OFFLINE = stat.FILE_ATTRIBUTE_OFFLINE
    NOT_CONTENT_INDEXED = stat.FILE_ATTRIBUTE_NOT_CONTENT_INDEXED
    ENCRYPTED = stat.FILE_ATTRIBUTE_ENCRYPTED
    INTEGRITY_STREAM = stat.FILE_ATTRIBUTE_INTEGRITY_STREAM
    VIRTUAL = stat.FILE_ATTRIBUTE_VIRTUAL
    NO_SCRUB_DATA = stat.FILE_ATTRIBUTE_NO_SCRUB_DATA


READ_ONLY_OR_ARCHIVE = FileAttributes.READONLY | FileAttributes.ARCHIVE

FlagsArg = Union[FileAttributes, str, Iterable[Union[FileAttributes, str]]]


def _lookup(name: str) -> FileAttributes:
    key = name.strip().upper().replace("-", "_")
    if key == "READ_ONLY":
        key = "READONLY"
    try:
        return FileAttributes[key]
    except KeyError:
        raise ValueError(f"Unknown file attribute: {name}") from None


def coerce_flags(flags: FlagsArg) -> FileAttributes:
    """
    Normalize a flag argument into a single FileAttributes value.

    Accepts a FileAttributes value (possibly combined), a flag name
    such as "readonly" or "archive", or an iterable of either.

    Raises:
        TypeError: If the argument is not one of the accepted forms
        ValueError: If a flag name is not a known attribute
    """
    if isinstance(flags, FileAttributes):
        return flags
    if isinstance(flags, str):
        return _lookup(flags)
    if isinstance(flags, int):
        raise TypeError("Raw integers are not accepted, use FileAttributes members")

    try:
        items = list(flags)
    except TypeError:
        raise TypeError(f"Unsupported flag argument: {flags!r}") from None

    combined = FileAttributes.NONE
    for item in items:
        if isinstance(item, FileAttributes):
            combined |= item
        elif isinstance(item, str):
            combined |= _lookup(item)
        else:
            raise TypeError(f"Unsupported flag argument: {item!r}")
    return combined
