"""
Attribute operations for single files.

Every operation reads the attribute set fresh from disk. Clears write
back only when the computed value differs from what was read.
"""

import os
from typing import Optional, Union

from core.config import DEFAULT_CONFIG, load_config
from core.logger import AuditLogger, ActionType, ActionStatus

from .accessor import AttributeAccessor, default_accessor
from .file_info import FileInfo
from .flags import FileAttributes, FlagsArg, READ_ONLY_OR_ARCHIVE, coerce_flags


FileRef = Union[str, os.PathLike, FileInfo]


class FileAttributeOperator:
    """Queries and clears attribute flags on files."""

    def __init__(
        self,
        accessor: Optional[AttributeAccessor] = None,
        logger: Optional[AuditLogger] = None
    ):
        """
        Initialize FileAttributeOperator.

        Args:
            accessor: Host attribute accessor (platform default if None)
            logger: Audit logger instance, or None to skip auditing
        """
        self.accessor = accessor or default_accessor()
        self.logger = logger

    @classmethod
    def from_config(
        cls,
        config_path: Optional[str] = "file_attrs.yaml",
        accessor: Optional[AttributeAccessor] = None
    ) -> "FileAttributeOperator":
        """Build an operator from the settings file."""
        config = load_config(config_path)
        audit = config.get("audit") or {}

        logger = None
        if audit.get("enabled"):
            log_path = audit.get("log_path") or DEFAULT_CONFIG["audit"]["log_path"]
            logger = AuditLogger(log_path=log_path)

        return cls(accessor=accessor, logger=logger)

    def _log(self, action_type: ActionType, description: str, target: str, **kwargs) -> None:
        if self.logger is not None:
            self.logger.log_action(
                action_type=action_type,
                description=description,
                target=target,
                **kwargs
            )

    def get_flags(self, file: FileRef) -> FileAttributes:
        """
        Read the current attribute set of a file.

        Args:
            file: Path or FileInfo

        Returns:
            The file's attributes as stored on disk

        Raises:
            FileNotFoundError: If the file doesn't exist
            OSError: If the metadata can't be read
        """
        path = os.fspath(file)
        try:
            return self.accessor.read(path)
        except FileNotFoundError as e:
            raise FileNotFoundError(f"File not found: {path}") from e

    def has_any_of(self, file: FileRef, flags: FlagsArg) -> bool:
        """
        Check whether at least one of the given flags is set.

        Args:
            file: Path or FileInfo
            flags: Flags to look for

        Returns:
            True if the file has any of the flags, False otherwise
        """
        wanted = coerce_flags(flags)
        current = self.get_flags(file)
        found = bool(current & wanted)

        self._log(
            ActionType.READ,
            f"Check any of {wanted!r}",
            os.fspath(file),
            result=str(found),
            metadata={"current": int(current), "requested": int(wanted)}
        )
        return found

    def has_all_of(self, file: FileRef, flags: FlagsArg) -> bool:
        """
        Check whether every one of the given flags is set.

        Args:
            file: Path or FileInfo
            flags: Flags that must all be present

        Returns:
            True only if the file has all of the flags
        """
        wanted = coerce_flags(flags)
        current = self.get_flags(file)
        found = (current & wanted) == wanted

        self._log(
            ActionType.READ,
            f"Check all of {wanted!r}",
            os.fspath(file),
            result=str(found),
            metadata={"current": int(current), "requested": int(wanted)}
        )
        return found

    def has_read_only_or_archive(self, file: FileRef) -> bool:
        """True if the file is read-only or marked for archiving."""
        return self.has_any_of(file, READ_ONLY_OR_ARCHIVE)

    def clear_flags(self, file: FileRef, flags: FlagsArg) -> None:
        """
        Clear the given flags on a file.

        Flags outside the argument are left as they are. When none of the
        flags is set nothing is written and a FileInfo reference is not
        refreshed. After a write, a FileInfo reference is refreshed so its
        cached attributes match the disk.

        Args:
            file: Path or FileInfo
            flags: Flags to clear

        Raises:
            FileNotFoundError: If the file doesn't exist
            PermissionError: If the host rejects the write
            OSError: For any other host failure
        """
        to_clear = coerce_flags(flags)
        path = os.fspath(file)

        current = self.get_flags(path)
        updated = FileAttributes(int(current) & ~int(to_clear))

        if updated == current:
            self._log(
                ActionType.WRITE,
                f"Nothing to clear for {to_clear!r}",
                path,
                status=ActionStatus.SKIPPED,
                metadata={"current": int(current), "requested": int(to_clear)}
            )
            return

        try:
            self.accessor.write(path, updated)
        except OSError as e:
            self._log(
                ActionType.WRITE,
                f"Failed to clear {to_clear!r}",
                path,
                status=ActionStatus.FAILED,
                result=f"Error: {e}",
                metadata={"current": int(current), "requested": int(to_clear)}
            )
            if isinstance(e, FileNotFoundError):
                raise FileNotFoundError(f"File not found: {path}") from e
            raise

        self._log(
            ActionType.WRITE,
            f"Cleared {current & to_clear!r}",
            path,
            result=f"Attributes now {updated!r}",
            metadata={"previous": int(current), "updated": int(updated)}
        )

        if isinstance(file, FileInfo):
            file.refresh()

    def clear_read_only_and_archive(self, file: FileRef) -> None:
        """Clear the read-only and archive flags on a file."""
        self.clear_flags(file, READ_ONLY_OR_ARCHIVE)


_default_operator: Optional[FileAttributeOperator] = None


def _operator() -> FileAttributeOperator:
    global _default_operator
    if _default_operator is None:
        _default_operator = FileAttributeOperator()
    return _default_operator


def get_flags(file: FileRef) -> FileAttributes:
    return _operator().get_flags(file)


def has_any_of(file: FileRef, flags: FlagsArg) -> bool:
    return _operator().has_any_of(file, flags)


def has_all_of(file: FileRef, flags: FlagsArg) -> bool:
    return _operator().has_all_of(file, flags)


def has_read_only_or_archive(file: FileRef) -> bool:
    return _operator().has_read_only_or_archive(file)


def clear_flags(file: FileRef, flags: FlagsArg) -> None:
    _operator().clear_flags(file, flags)


def clear_read_only_and_archive(file: FileRef) -> None:
    _operator().clear_read_only_and_archive(file)
