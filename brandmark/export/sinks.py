"""
sinks.py — Where an exported file ends up.

A sink receives a staged file and makes it available to the user: copied
into an export directory, or held in memory for an HTTP response.
"""

import logging
import shutil
from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

logger = logging.getLogger(__name__)


@dataclass
class Download:
    """A delivered file."""
    filename: str
    media_type: str
    size: int
    data: Optional[bytes] = None
    path: Optional[Path] = None


class DownloadSink(ABC):
    """Receives finished export files."""

    def __init__(self):
        self.downloads: List[Download] = []

    @abstractmethod
    def deliver(self, filename: str, source: Path, media_type: str) -> Download:
        """
        Deliver a staged file.

        Args:
            filename: Name the user should see
            source: Staged file; only valid for the duration of the call
            media_type: MIME type of the file

        Returns:
            The recorded Download
        """
        pass

    @property
    def last(self) -> Optional[Download]:
        """Most recent delivery, if any."""
        return self.downloads[-1] if self.downloads else None


class MemorySink(DownloadSink):
    """Keeps delivered files in memory."""

    def deliver(self, filename: str, source: Path, media_type: str) -> Download:
        data = source.read_bytes()
        download = Download(filename=filename, media_type=media_type,
                            size=len(data), data=data)
        self.downloads.append(download)
        return download


class DirectorySink(DownloadSink):
    """Copies delivered files into a directory."""

    def __init__(self, directory: Union[str, Path]):
        super().__init__()
        self.directory = Path(directory)

    def deliver(self, filename: str, source: Path, media_type: str) -> Download:
        self.directory.mkdir(parents=True, exist_ok=True)
        # Final path component only.
        target = self.directory / Path(filename).name
        shutil.copyfile(source, target)
        logger.debug(f"Wrote {target}")

        download = Download(filename=target.name, media_type=media_type,
                            size=target.stat().st_size, path=target)
        self.downloads.append(download)
        return download
