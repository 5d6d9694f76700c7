"""
Caller-owned file reference with a cached metadata view.
"""

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Optional, Union

from .accessor import AttributeAccessor, default_accessor
from .flags import FileAttributes


@dataclass
class FileInfo:
    """
    A file path plus a snapshot of its metadata.

    The snapshot is taken at construction and again on refresh(); it is
    never consulted by attribute operations, which always read the disk.
    """
    path: str
    name: str = ""
    size: int = 0
    modified: str = ""
    exists: bool = False
    attributes: FileAttributes = FileAttributes.NONE
    accessor: Optional[AttributeAccessor] = field(default=None, repr=False, compare=False)

    @classmethod
    def from_path(
        cls,
        path: Union[str, os.PathLike],
        accessor: Optional[AttributeAccessor] = None
    ) -> "FileInfo":
        """Build a FileInfo for path and take the first snapshot."""
        info = cls(path=os.fspath(path), accessor=accessor)
        info.refresh()
        return info

    def refresh(self) -> None:
        """
        Re-read the cached metadata from disk.

        A missing file is not an error here: the snapshot simply records
        exists=False with empty values.
        """
        path_obj = Path(self.path)
        self.name = path_obj.name

        try:
            stat = path_obj.stat()
        except FileNotFoundError:
            self.exists = False
            self.size = 0
            self.modified = ""
            self.attributes = FileAttributes.NONE
            return

        if self.accessor is None:
            self.accessor = default_accessor()

        self.exists = True
        self.size = stat.st_size if path_obj.is_file() else 0
        self.modified = datetime.fromtimestamp(stat.st_mtime).isoformat()
        self.attributes = self.accessor.read(self.path)

    def __fspath__(self) -> str:
        return self.path
