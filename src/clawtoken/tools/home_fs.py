"""
Home-directory filesystem access for the OpenClaw token bridge.

This module wraps the two platform capabilities the token reader depends on:
resolving the current user's home directory and reading a text file. Keeping
them behind a small interface lets callers substitute a temporary directory or
an in-memory mapping instead of touching the real home directory.
"""

import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Optional, Union

from ..errors import HomeDirUnresolvedError


logger = logging.getLogger(__name__)


class HomeFileSystem(ABC):
    """
    Capability interface for home-directory lookup and file reads.

    Implementations must not cache file contents; every call to read_text
    reflects the current state of the backing store.
    """

    @abstractmethod
    def home_dir(self) -> Path:
        """
        Resolve the current user's home directory.

        Returns:
            Absolute path of the home directory

        Raises:
            HomeDirUnresolvedError: If the home directory cannot be determined
        """

    @abstractmethod
    def read_text(self, path: Path) -> str:
        """
        Read a file as UTF-8 text.

        Args:
            path: File to read

        Returns:
            The file contents

        Raises:
            OSError: If the file is missing or unreadable
            UnicodeDecodeError: If the file is not valid UTF-8
        """


def _check_home(home: Optional[Union[str, Path]]) -> Path:
    """Reject empty or relative home directories."""
    if home is None or str(home) == "":
        raise HomeDirUnresolvedError()

    home = Path(home)
    if not home.is_absolute():
        raise HomeDirUnresolvedError(f"cannot resolve home directory: {home} is not absolute")
    return home


class LocalHomeFileSystem(HomeFileSystem):
    """Real filesystem, home resolved through the platform."""

    def home_dir(self) -> Path:
        try:
            home = Path.home()
        except (RuntimeError, KeyError) as e:
            # Path.home() raises RuntimeError (KeyError on older interpreters)
            # when neither the environment nor the password database has an entry
            raise HomeDirUnresolvedError(f"cannot resolve home directory: {e}") from e
        return _check_home(home)

    def read_text(self, path: Path) -> str:
        logger.debug(f"Reading {path}")
        with open(path, 'r', encoding='utf-8') as f:
            return f.read()


class FixedHomeFileSystem(LocalHomeFileSystem):
    """
    Real filesystem rooted at an explicit home directory.

    Useful for pointing the reader at a temporary directory in tests or at a
    host-chosen profile directory.
    """

    def __init__(self, home: Union[str, Path]):
        self.home = Path(home)

    def home_dir(self) -> Path:
        return _check_home(self.home)


class InMemoryHomeFileSystem(HomeFileSystem):
    """
    In-memory filesystem keyed by absolute path.

    Attributes:
        home: Home directory to report, or None to simulate an unresolvable home
        files: Mapping of path to file contents
        reads: Number of read_text calls served
    """

    def __init__(self, home: Optional[Union[str, Path]] = "/home/user",
                 files: Optional[Dict[Union[str, Path], str]] = None):
        self.home = Path(home) if home is not None else None
        self.files: Dict[Path, str] = {Path(p): text for p, text in (files or {}).items()}
        self.reads = 0

    def home_dir(self) -> Path:
        return _check_home(self.home)

    def write(self, path: Union[str, Path], text: str) -> None:
        """Store text at path, replacing any previous contents."""
        self.files[Path(path)] = text

    def read_text(self, path: Path) -> str:
        self.reads += 1
        try:
            return self.files[Path(path)]
        except KeyError:
            raise FileNotFoundError(2, "No such file or directory", str(path)) from None
