"""
Yomitan-format dictionary metadata and updates for redaadic.

A dictionary archive ships an ``index.json`` describing it (title, dotted
revision, update URLs). This module loads that index, checks the index URL
for a newer revision, and installs a downloaded archive into a directory.

Usage:
    from redaadic.dictionary import DictionaryPackage, UpdateState

    package = DictionaryPackage.from_path("jitendex/index.json")
    if package.fetch_update() == UpdateState.UPDATE_AVAILABLE:
        package.update("jitendex")
"""

import io
import json
import logging
import shutil
import zipfile
import zlib
from enum import Enum
from pathlib import Path
from typing import Callable, List, Optional, Union
from urllib.error import HTTPError, URLError
from urllib.request import Request, urlopen

from pydantic import BaseModel, ConfigDict, Field

from redaadic import settings

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


class DictionaryError(Exception):
    """Raised for bad revisions, failed downloads and unsafe archives."""


class UpdateState(Enum):
    """Result of comparing an installed revision with the published one."""
    UNKNOWN = 'unknown'
    UP_TO_DATE = 'up-to-date'
    UPDATE_AVAILABLE = 'update-available'


# =============================================================================
# index.json
# =============================================================================

class DictionaryIndex(BaseModel):
    """
    Pydantic model for a dictionary's ``index.json``.

    Field names are snake_case; the JSON keys are camelCase.
    """
    model_config = ConfigDict(populate_by_name=True)

    title: str = Field(..., description="Dictionary title")
    revision: str = Field(..., description="Dotted revision, e.g. '2025.03.01'")
    sequenced: bool = Field(False, description="True if entries carry sequence numbers")
    format: int = Field(..., description="Dictionary format version")
    author: Optional[str] = None
    is_updatable: bool = Field(False, alias="isUpdatable")
    index_url: Optional[str] = Field(None, alias="indexUrl", description="URL of the published index.json")
    download_url: Optional[str] = Field(None, alias="downloadUrl", description="URL of the published archive")
    url: Optional[str] = None
    description: Optional[str] = None
    attribution: Optional[str] = None
    source_language: Optional[str] = Field(None, alias="sourceLanguage")
    target_language: Optional[str] = Field(None, alias="targetLanguage")
    frequency_mode: Optional[str] = Field(None, alias="frequencyMode")

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "DictionaryIndex":
        """Load an index.json file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


def _parse_revision(revision: str) -> List[int]:
    try:
        return [int(part) for part in revision.split(".")]
    except ValueError as e:
        raise DictionaryError(f"Invalid revision: {revision!r}") from e


def compare_revisions(current: str, new: str) -> UpdateState:
    """
    Compare two dotted revisions.

    Segments are compared as integers, most significant first.

    Args:
        current: Installed revision.
        new: Published revision.

    Returns:
        UPDATE_AVAILABLE if new is later, otherwise UP_TO_DATE.

    Raises:
        DictionaryError: If the segment counts differ or a segment is not
            an integer.
    """
    current_parts = _parse_revision(current)
    new_parts = _parse_revision(new)
    if len(current_parts) != len(new_parts):
        raise DictionaryError(f"Mismatched revisions: {current!r} and {new!r}")

    for current_part, new_part in zip(current_parts, new_parts):
        if new_part > current_part:
            return UpdateState.UPDATE_AVAILABLE
        if new_part < current_part:
            break
    return UpdateState.UP_TO_DATE


# =============================================================================
# Archives
# =============================================================================

def _download(url: str, timeout: float) -> bytes:
    req = Request(url, headers={"User-Agent": "redaadic"})
    try:
        with urlopen(req, timeout=timeout) as resp:
            return resp.read()
    except HTTPError as e:
        raise DictionaryError(f"HTTP error {e.code} fetching {url}") from e
    except URLError as e:
        raise DictionaryError(f"Connection error fetching {url}: {e}") from e


def _clear_directory(directory: Path) -> None:
    for item in directory.iterdir():
        if item.is_dir() and not item.is_symlink():
            shutil.rmtree(item)
        else:
            item.unlink()


def extract_archive(
    data: bytes,
    target_dir: Union[str, Path],
    progress_callback: Optional[ProgressCallback] = None,
) -> int:
    """
    Replace the contents of target_dir with a zip archive.

    Every entry path is checked before anything is deleted, and every
    extracted file is checked against its CRC-32.

    Args:
        data: Zip archive bytes.
        target_dir: Directory to fill; created if missing.
        progress_callback: Called with (bytes extracted, total bytes).

    Returns:
        Number of files extracted.

    Raises:
        DictionaryError: On a corrupt archive, an entry escaping target_dir,
            or a checksum mismatch.
    """
    target = Path(target_dir)
    target.mkdir(parents=True, exist_ok=True)
    root = target.resolve()

    try:
        archive = zipfile.ZipFile(io.BytesIO(data))
    except zipfile.BadZipFile as e:
        raise DictionaryError(f"Invalid archive: {e}") from e

    with archive:
        entries = archive.infolist()
        for info in entries:
            path = (root / info.filename).resolve()
            if path != root and root not in path.parents:
                raise DictionaryError(f"Path traversal in archive entry: {info.filename}")

        _clear_directory(target)

        total = sum(info.file_size for info in entries)
        done = 0
        count = 0
        for info in entries:
            path = (root / info.filename).resolve()
            if info.is_dir():
                path.mkdir(parents=True, exist_ok=True)
                continue

            try:
                content = archive.read(info)
            except zipfile.BadZipFile as e:
                raise DictionaryError(f"Invalid checksum for file {info.filename}") from e
            if zlib.crc32(content) & 0xFFFFFFFF != info.CRC:
                raise DictionaryError(f"Invalid checksum for file {info.filename}")

            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_bytes(content)
            count += 1
            done += info.file_size
            if progress_callback:
                progress_callback(done, total)

    logger.info(f"Extracted {count} files to {target}")
    return count


# =============================================================================
# Installed dictionaries
# =============================================================================

class DictionaryPackage:
    """
    An installed dictionary and its update state.

    The update state starts UNKNOWN and is set by fetch_update().
    """

    def __init__(self, index: DictionaryIndex):
        self.index = index
        self.has_update = UpdateState.UNKNOWN

    @classmethod
    def from_path(cls, path: Union[str, Path]) -> "DictionaryPackage":
        """Load an installed dictionary from its index.json."""
        return cls(DictionaryIndex.from_path(path))

    @property
    def title(self) -> str:
        return self.index.title

    @property
    def revision(self) -> str:
        return self.index.revision

    def fetch_update(self, timeout: Optional[float] = None) -> UpdateState:
        """
        Check the published index for a newer revision.

        Dictionaries without an index URL stay UNKNOWN.

        Raises:
            DictionaryError: On a failed download, an unreadable index, or
                incomparable revisions.
        """
        if not self.index.index_url:
            return self.has_update

        content = _download(self.index.index_url, timeout or settings.DOWNLOAD_TIMEOUT)
        try:
            revision = json.loads(content)["revision"]
        except (ValueError, KeyError, TypeError) as e:
            raise DictionaryError(f"No revision in published index for {self.title}") from e

        self.has_update = compare_revisions(self.revision, str(revision))
        logger.info(f"{self.title} {self.revision}: {self.has_update.value} (published {revision})")
        return self.has_update

    def update(
        self,
        target_dir: Union[str, Path],
        progress_callback: Optional[ProgressCallback] = None,
        timeout: Optional[float] = None,
    ) -> bool:
        """
        Download and install the published archive into target_dir.

        Does nothing unless fetch_update() found a newer revision and the
        index has a download URL.

        Returns:
            True if the dictionary was replaced.
        """
        if self.has_update != UpdateState.UPDATE_AVAILABLE or not self.index.download_url:
            return False

        data = _download(self.index.download_url, timeout or settings.DOWNLOAD_TIMEOUT)
        extract_archive(data, target_dir, progress_callback=progress_callback)

        index_path = Path(target_dir) / "index.json"
        if index_path.exists():
            self.index = DictionaryIndex.from_path(index_path)
        self.has_update = UpdateState.UP_TO_DATE
        return True
