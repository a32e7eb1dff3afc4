"""Project metadata persistence.

Each project directory holds a `.cdtest.toml` file describing the project:

    name = "demo"
    timestamp = "2026-10-19T09:30:12.345678Z"
    garbage_collection = "2weeks"

Only the ProjectRecord fields are stored. Runtime decisions (volatility,
override, existence) are recomputed on every invocation.
"""

import re
import tomllib
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from pathlib import Path

import tomlkit

from cdtest.core.durations import format_duration, parse_duration
from cdtest.core.errors import (
    DurationParseError,
    InvalidProjectDirectoryError,
    MetadataParseError,
    MetadataReadError,
    WriteOutError,
)

METADATA_FILENAME = ".cdtest.toml"
DEFAULT_RETENTION = timedelta(weeks=2)

# Fractional seconds beyond microseconds are dropped before parsing.
_EXCESS_FRACTION = re.compile(r"(\.\d{6})\d+")


@dataclass(frozen=True)
class ProjectRecord:
    """Persisted project metadata.

    Attributes:
        name: Project name, also the leaf directory name under a root
        timestamp: Last time the project was entered (timezone-aware, UTC)
        retention: How long after timestamp the project may be collected
    """

    name: str
    timestamp: datetime
    retention: timedelta


def format_timestamp(timestamp: datetime) -> str:
    """Render a timestamp as RFC 3339 in UTC with microsecond precision."""
    return timestamp.astimezone(UTC).strftime("%Y-%m-%dT%H:%M:%S.%fZ")


def parse_timestamp(text: str) -> datetime:
    """Parse an RFC 3339 timestamp, assuming UTC when no offset is given.

    Raises:
        ValueError: If the text is not an ISO 8601 / RFC 3339 timestamp
        OverflowError: If the instant falls outside datetime's range in UTC
    """
    parsed = datetime.fromisoformat(_EXCESS_FRACTION.sub(r"\1", text.strip()))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed.astimezone(UTC)


def record_to_toml(record: ProjectRecord) -> str:
    """Serialize a record to metadata file content."""
    doc = tomlkit.document()
    doc["name"] = record.name
    doc["timestamp"] = format_timestamp(record.timestamp)
    doc["garbage_collection"] = format_duration(record.retention)
    return tomlkit.dumps(doc)


def record_from_toml(content: str) -> ProjectRecord:
    """Deserialize metadata file content into a record.

    Raises:
        MetadataParseError: If the content is not TOML, or a field is missing,
            has the wrong type, or does not parse
    """
    try:
        data = tomllib.loads(content)
    except tomllib.TOMLDecodeError as e:
        raise MetadataParseError(content) from e

    name = data.get("name")
    raw_timestamp = data.get("timestamp")
    raw_retention = data.get("garbage_collection")
    if not isinstance(name, str) or not name:
        raise MetadataParseError(content)
    if not isinstance(raw_retention, str):
        raise MetadataParseError(content)

    # Hand-edited files may use a native TOML datetime instead of a string
    if isinstance(raw_timestamp, datetime):
        timestamp = raw_timestamp
        if timestamp.tzinfo is None:
            timestamp = timestamp.replace(tzinfo=UTC)
        try:
            timestamp = timestamp.astimezone(UTC)
        except OverflowError as e:
            raise MetadataParseError(content) from e
    elif isinstance(raw_timestamp, str):
        try:
            timestamp = parse_timestamp(raw_timestamp)
        except (ValueError, OverflowError) as e:
            raise MetadataParseError(content) from e
    else:
        raise MetadataParseError(content)

    try:
        retention = parse_duration(raw_retention)
    except DurationParseError as e:
        raise MetadataParseError(content) from e

    return ProjectRecord(name=name, timestamp=timestamp, retention=retention)


class ProjectStore(ABC):
    """Abstract interface for reading and writing project metadata.

    Provides dependency injection for metadata access, enabling in-memory
    implementations for tests without touching the filesystem.
    """

    @abstractmethod
    def load(self, directory: Path) -> ProjectRecord:
        """Load the project stored in a project directory.

        Args:
            directory: Candidate project directory

        Returns:
            ProjectRecord read from the directory's metadata file

        Raises:
            InvalidProjectDirectoryError: If directory is not an existing directory
            MetadataReadError: If the metadata file cannot be read
            MetadataParseError: If the metadata does not match the schema
        """
        ...

    @abstractmethod
    def save(self, record: ProjectRecord, directory: Path) -> None:
        """Write a project's metadata into its directory, replacing any previous file.

        Raises:
            WriteOutError: If the metadata cannot be written
        """
        ...

    def metadata_path(self, directory: Path) -> Path:
        """Get the metadata file path for a project directory."""
        return directory / METADATA_FILENAME


class FilesystemProjectStore(ProjectStore):
    """Production implementation that reads/writes `<directory>/.cdtest.toml`."""

    def load(self, directory: Path) -> ProjectRecord:
        if not directory.is_dir():
            raise InvalidProjectDirectoryError(directory)

        metadata_path = self.metadata_path(directory)
        try:
            content = metadata_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise MetadataReadError(metadata_path) from e

        record = record_from_toml(content)
        # The name doubles as the directory name; a mismatch would point
        # home paths at some other project.
        if record.name != directory.name:
            raise MetadataParseError(content)
        return record

    def save(self, record: ProjectRecord, directory: Path) -> None:
        metadata_path = self.metadata_path(directory)
        content = record_to_toml(record)
        try:
            metadata_path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise WriteOutError(metadata_path) from e


class InMemoryProjectStore(ProjectStore):
    """Test implementation that stores records in memory keyed by directory."""

    def __init__(self, records: dict[Path, ProjectRecord] | None = None) -> None:
        """Initialize in-memory store.

        Args:
            records: Initial mapping of project directory to record
        """
        self._records = dict(records) if records is not None else {}
        self._save_calls: list[tuple[ProjectRecord, Path]] = []

    @property
    def records(self) -> dict[Path, ProjectRecord]:
        """Copy of the stored records, for test assertions."""
        return dict(self._records)

    @property
    def save_calls(self) -> list[tuple[ProjectRecord, Path]]:
        """Get the list of save() calls that were made.

        This property is for test assertions only.
        """
        return self._save_calls.copy()

    def load(self, directory: Path) -> ProjectRecord:
        if directory not in self._records:
            raise MetadataReadError(self.metadata_path(directory))
        return self._records[directory]

    def save(self, record: ProjectRecord, directory: Path) -> None:
        self._save_calls.append((record, directory))
        self._records[directory] = record
