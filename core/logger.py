"""
Audit Logger for file attribute operations.

Provides append-only logging of attribute queries and changes with
timestamps, targets and outcomes, for auditing which files were touched.
"""

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Dict, Any
from enum import Enum


class ActionType(Enum):
    """Types of actions that can be logged."""
    READ = "read"
    WRITE = "write"


class ActionStatus(Enum):
    """Outcome of an action."""
    EXECUTED = "executed"
    SKIPPED = "skipped"    # nothing to change, no write issued
    FAILED = "failed"


@dataclass
class AuditEntry:
    """Represents a single audit log entry."""
    timestamp: str
    action_type: str
    action_description: str
    target: Optional[str]
    status: str
    result: Optional[str]
    metadata: Dict[str, Any]

    @classmethod
    def create(
        cls,
        action_type: ActionType,
        action_description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> "AuditEntry":
        """Factory method to create an audit entry with current timestamp."""
        return cls(
            timestamp=datetime.now().isoformat(),
            action_type=action_type.value,
            action_description=action_description,
            target=target,
            status=status.value,
            result=result,
            metadata=metadata or {}
        )

    def to_json(self) -> str:
        return json.dumps(asdict(self), ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> "AuditEntry":
        return cls(**json.loads(json_str))


class AuditLogger:
    """
    Append-only audit logger.

    Entries are written to a JSONL file, one entry per line. Lines that
    fail to parse are skipped on read.
    """

    CSV_COLUMNS = "timestamp,action_type,action_description,target,status,result"

    def __init__(self, log_path: str = "data/attr_audit.jsonl"):
        """
        Initialize the audit logger.

        Args:
            log_path: Path to the JSONL log file
        """
        self.log_path = Path(log_path)
        self._ensure_log_directory()

    def _ensure_log_directory(self) -> None:
        self.log_path.parent.mkdir(parents=True, exist_ok=True)
        if not self.log_path.exists():
            self.log_path.touch()

    def _iter_entries(self):
        if not self.log_path.exists():
            return

        with open(self.log_path, "r", encoding="utf-8") as f:
            for line in f:
                line = line.strip()
                if not line:
                    continue
                try:
                    yield AuditEntry.from_json(line)
                except (json.JSONDecodeError, TypeError):
                    continue

    def log(self, entry: AuditEntry) -> None:
        """Append an audit entry to the log."""
        with open(self.log_path, "a", encoding="utf-8") as f:
            f.write(entry.to_json() + "\n")

    def log_action(
        self,
        action_type: ActionType,
        description: str,
        target: Optional[str] = None,
        status: ActionStatus = ActionStatus.EXECUTED,
        result: Optional[str] = None,
        metadata: Optional[Dict[str, Any]] = None
    ) -> AuditEntry:
        """
        Create and log an entry in one call.

        Returns the created AuditEntry.
        """
        entry = AuditEntry.create(
            action_type=action_type,
            action_description=description,
            target=target,
            status=status,
            result=result,
            metadata=metadata
        )
        self.log(entry)
        return entry

    def get_recent(self, limit: int = 100) -> List[AuditEntry]:
        """
        Get the most recent audit entries.

        Args:
            limit: Maximum number of entries to return

        Returns:
            List of AuditEntry objects, most recent first
        """
        entries = list(self._iter_entries())
        return list(reversed(entries[-limit:])) if limit > 0 else []

    def get_by_date(self, date: datetime) -> List[AuditEntry]:
        """Get all audit entries logged on a specific date."""
        date_str = date.strftime("%Y-%m-%d")
        return [e for e in self._iter_entries() if e.timestamp.startswith(date_str)]

    def get_by_action_type(self, action_type: ActionType, limit: int = 100) -> List[AuditEntry]:
        """
        Get audit entries filtered by action type.

        Args:
            action_type: The ActionType to filter by
            limit: Maximum number of entries to return
        """
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.action_type == action_type.value:
                entries.append(entry)
        return entries

    def get_by_status(self, status: ActionStatus, limit: int = 100) -> List[AuditEntry]:
        """
        Get audit entries with the given status.

        Useful for reviewing failed writes or skipped (no-op) clears.
        """
        entries = []
        for entry in self._iter_entries():
            if len(entries) >= limit:
                break
            if entry.status == status.value:
                entries.append(entry)
        return entries

    def export(self, format: str = "json") -> str:
        """
        Export the entire audit log.

        Args:
            format: Export format ("json" or "csv")

        Returns:
            String containing the exported data
        """
        entries = self.get_recent(limit=10000)

        if format == "json":
            return json.dumps([asdict(e) for e in entries], indent=2)
        elif format == "csv":
            lines = [self.CSV_COLUMNS]
            for e in entries:
                lines.append(
                    f'"{e.timestamp}","{e.action_type}","{e.action_description}",'
                    f'"{e.target or ""}","{e.status}","{e.result or ""}"'
                )
            return "\n".join(lines) + ("\n" if not entries else "")
        else:
            raise ValueError(f"Unsupported export format: {format}")

    def clear(self, confirm: bool = False) -> bool:
        """
        Clear the audit log, keeping a timestamped backup.

        Args:
            confirm: Must be True to actually clear the log

        Returns:
            True if cleared, False otherwise
        """
        if not confirm or not self.log_path.exists():
            return False

        backup_path = self.log_path.with_suffix(f".backup.{datetime.now().strftime('%Y%m%d_%H%M%S')}.jsonl")
        self.log_path.rename(backup_path)
        self.log_path.touch()
        return True
