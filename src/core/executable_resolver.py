"""
Selection of the default script interpreter.

The resolver keeps three sources of interpreters: the ones found on disk at
startup, the ones the user configured, and the default picked among them.
The default is resolved lazily and then pinned until it is changed
explicitly.
"""
import logging
from enum import Enum
from typing import Iterable, List, Optional

logger = logging.getLogger(__name__)


class ResolverPhase(Enum):
    UNRESOLVED = "Unresolved"
    RESOLVED = "Resolved"


class ExecutableResolver:
    """
    Holds manual and auto-detected interpreter paths and the default one.

    Invariant: once resolved, the default is contained in the manual or the
    auto-detected list (`set_default_executable` adds unknown paths to the
    manual list). `set_manual_executables` may break this until the next
    explicit change, because a pinned default is never re-derived.
    """

    def __init__(self, auto_detected: Optional[Iterable[str]] = None,
                 manual: Optional[Iterable[str]] = None):
        self._auto_detected: List[str] = list(auto_detected or [])
        self._manual: List[str] = list(manual or [])
        self._default = ""
        self._phase = ResolverPhase.UNRESOLVED

    @property
    def phase(self) -> ResolverPhase:
        return self._phase

    def auto_detected_executables(self) -> List[str]:
        return list(self._auto_detected)

    def set_auto_detected_executables(self, paths: Iterable[str]):
        self._auto_detected = list(paths)

    def manual_executables(self) -> List[str]:
        return list(self._manual)

    def set_manual_executables(self, paths: Iterable[str]):
        """Replace the manual list. The pinned default is left as is."""
        self._manual = list(paths)

    def add_executable(self, path: str):
        if path and path not in self._manual:
            self._manual.append(path)
            logger.debug(f"Added manual executable {path}")

    def executables(self) -> List[str]:
        """Manual then auto-detected paths, without duplicates."""
        return list(dict.fromkeys(self._manual + self._auto_detected))

    def default_executable(self) -> str:
        """
        Return the default interpreter, resolving it on first use.

        Falls back to the first manual entry, then the first auto-detected
        one. Returns "" when no interpreter is known.
        """
        if self._phase is ResolverPhase.UNRESOLVED:
            if self._manual:
                self._pin(self._manual[0])
            elif self._auto_detected:
                self._pin(self._auto_detected[0])
        return self._default

    def set_default_executable(self, path: str):
        """
        Pin `path` as default. An empty path clears the default.

        "" is never added to the manual list: it names no interpreter and
        would be offered as one after the next load.
        """
        if not path:
            self._default = ""
            self._phase = ResolverPhase.UNRESOLVED
            return
        if path not in self._auto_detected and path not in self._manual:
            self.add_executable(path)
        self._pin(path)

    def _pin(self, path: str):
        self._default = path
        self._phase = ResolverPhase.RESOLVED
        logger.info(f"Default script executable: {path}")
