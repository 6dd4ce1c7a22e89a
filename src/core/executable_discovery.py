"""
Discovery of Python interpreter executables in well-known locations.

The search is driven by a SearchProfile so that platform specifics (which
directories, which name patterns) stay out of the scanning algorithm, and by
a filesystem object so the scan can run against something other than the
local disk.
"""
import fnmatch
import logging
import os
import sys
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchProfile:
    """Where and what to look for."""
    locations: Sequence[str]
    # Files directly inside a location
    file_patterns: Sequence[str] = ("python*",)
    # Directories inside a location that are searched one level deep
    dir_patterns: Sequence[str] = ()
    # Files inside such a directory
    nested_patterns: Sequence[str] = ()
    case_sensitive: bool = True

    def matches(self, name: str, patterns: Sequence[str]) -> bool:
        if self.case_sensitive:
            return any(fnmatch.fnmatchcase(name, p) for p in patterns)
        lowered = name.lower()
        return any(fnmatch.fnmatchcase(lowered, p.lower()) for p in patterns)


def linux_profile() -> SearchProfile:
    return SearchProfile(
        locations=("/usr/bin", "/usr/local/bin", "/bin", "/opt/bin"),
        file_patterns=("python*",),
    )


def windows_profile(user: Optional[str] = None) -> SearchProfile:
    user = user or os.environ.get("USERNAME", "")
    return SearchProfile(
        locations=(
            "C:/",
            "C:/Program Files/",
            "C:/Program Files (x86)/",
            f"C:/Users/{user}/AppData/Local/Programs/",
        ),
        file_patterns=("python*.exe",),
        dir_patterns=("Python*",),
        nested_patterns=("python*.exe",),
        case_sensitive=False,
    )


def default_profile() -> SearchProfile:
    """Profile for the running platform. Other platforms search nothing."""
    if sys.platform.startswith("win"):
        return windows_profile()
    if sys.platform.startswith("linux"):
        return linux_profile()
    return SearchProfile(locations=())


class LocalFileSystem:
    """Directory listing and executability checks against the local disk."""

    def exists(self, path: str) -> bool:
        return os.path.isdir(path)

    def list_dir(self, path: str) -> List[str]:
        try:
            return sorted(os.listdir(path), key=str.lower)
        except OSError as e:
            logger.debug(f"Cannot list {path}: {e}")
            return []

    def is_dir(self, path: str) -> bool:
        return os.path.isdir(path)

    def is_file(self, path: str) -> bool:
        return os.path.isfile(path)

    def is_executable(self, path: str) -> bool:
        return os.access(path, os.X_OK)

    def absolute_path(self, path: str) -> str:
        return os.path.abspath(path)


@dataclass
class ExecutableDiscovery:
    profile: SearchProfile = field(default_factory=default_profile)
    fs: LocalFileSystem = field(default_factory=LocalFileSystem)

    def discover(self) -> List[str]:
        """
        Scan every location of the profile in order.

        Returns absolute executable paths without duplicates, in the order
        they were first seen.
        """
        found: List[str] = []
        for location in self.profile.locations:
            if not self.fs.exists(location):
                logger.debug(f"Skipping missing location {location}")
                continue
            found.extend(self._scan_location(location))

        unique = list(dict.fromkeys(found))
        logger.info(f"Discovered {len(unique)} Python executable(s)")
        return unique

    def _scan_location(self, location: str) -> List[str]:
        result = []
        for name in self.fs.list_dir(location):
            path = os.path.join(location, name)
            if self.fs.is_dir(path):
                if self.profile.matches(name, self.profile.dir_patterns):
                    result.extend(self._scan_nested(path))
            elif self.profile.matches(name, self.profile.file_patterns) and self._is_candidate(path):
                result.append(self.fs.absolute_path(path))
        return result

    def _scan_nested(self, directory: str) -> List[str]:
        result = []
        for name in self.fs.list_dir(directory):
            path = os.path.join(directory, name)
            if self.profile.matches(name, self.profile.nested_patterns) and self._is_candidate(path):
                result.append(self.fs.absolute_path(path))
        return result

    def _is_candidate(self, path: str) -> bool:
        return self.fs.is_file(path) and self.fs.is_executable(path)


def find_python_executables(profile: Optional[SearchProfile] = None) -> List[str]:
    """Convenience wrapper scanning the local disk."""
    return ExecutableDiscovery(profile or default_profile()).discover()
