"""
File attributes module.

Inspects and clears attribute flags (read-only, archive, ...) on single files.
"""

from .flags import FileAttributes, READ_ONLY_OR_ARCHIVE, coerce_flags
from .accessor import (
    AttributeAccessor,
    PosixAttributeAccessor,
    WindowsAttributeAccessor,
    default_accessor,
)
from .file_info import FileInfo
from .attr_ops import (
    FileAttributeOperator,
    get_flags,
    has_any_of,
    has_all_of,
    has_read_only_or_archive,
    clear_flags,
    clear_read_only_and_archive,
)

__all__ = [
    'FileAttributes',
    'READ_ONLY_OR_ARCHIVE',
    'coerce_flags',
    'AttributeAccessor',
    'PosixAttributeAccessor',
    'WindowsAttributeAccessor',
    'default_accessor',
    'FileInfo',
    'FileAttributeOperator',
    'get_flags',
    'has_any_of',
    'has_all_of',
    'has_read_only_or_archive',
    'clear_flags',
    'clear_read_only_and_archive',
]
