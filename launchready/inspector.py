"""Repository inspection: tracked-file listing, content search, history search.

This is the only module that touches the filesystem/process boundary.
Every call is fail-soft: a missing git binary, a directory that is not a
repository, or an unreadable file yields an empty result instead of an
exception, so a missing capability lowers a category score rather than
aborting the audit.
"""
from __future__ import annotations

import fnmatch
import logging
import os
import re
import subprocess
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence

logger = logging.getLogger(__name__)

MAX_LISTED_FILES = 100
MAX_SEARCH_LINES = 50
GIT_TIMEOUT_SECONDS = 30

SECRET_KEYWORDS = ("password", "secret", "api_key", "private_key")


def shell_quote(arg: str) -> str:
    """Quote *arg* for a POSIX shell: single quotes, embedded quotes as '\\''."""
    return "'" + arg.replace("'", "'\\''") + "'"


def _as_pathspecs(globs: str | Sequence[str]) -> list[str]:
    if isinstance(globs, str):
        return [globs]
    return list(globs)


class Inspector(ABC):
    """Read-only view of a repository used by the category checks."""

    @abstractmethod
    def list_tracked_files(self, pattern: str, scope_dir: str = ".") -> list[str]:
        ...

    @abstractmethod
    def search_content(self, pattern: str, globs: str | Sequence[str] = "*") -> list[str]:
        ...

    @abstractmethod
    def file_exists(self, rel_path: str) -> bool:
        ...

    @abstractmethod
    def read_file(self, rel_path: str) -> str | None:
        ...

    @abstractmethod
    def secrets_in_history(self) -> bool:
        ...

    def read_files(self, paths: Iterable[str]) -> str:
        """Concatenate the readable files among *paths*, newline separated."""
        contents = [self.read_file(p) for p in paths]
        return "\n".join(c for c in contents if c is not None)


class GitInspector(Inspector):
    """Inspector backed by the ``git`` command line."""

    def __init__(self, repo_path: str) -> None:
        self.repo_path = os.path.abspath(repo_path)

    def _git(self, args: list[str]) -> str | None:
        """Run git in the repository. Returns stdout, or None on failure."""
        cmd = ["git", *args]
        logger.debug("running: %s", " ".join(shell_quote(a) for a in cmd))
        try:
            result = subprocess.run(
                cmd,
                cwd=self.repo_path,
                capture_output=True,
                text=True,
                encoding="utf-8",
                errors="replace",
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except (FileNotFoundError, subprocess.TimeoutExpired, OSError) as e:
            logger.debug("git %s failed: %s", args[0], e)
            return None
        # git grep exits 1 when nothing matched
        if result.returncode != 0:
            logger.debug("git %s exited %d: %s", args[0], result.returncode,
                         result.stderr.strip())
            return None
        return result.stdout

    def list_tracked_files(self, pattern: str, scope_dir: str = ".") -> list[str]:
        try:
            regex = re.compile(pattern)
        except re.error as e:
            logger.debug("invalid file pattern %r: %s", pattern, e)
            return []
        # -z: raw paths, NUL separated; otherwise non-ASCII names come back C-quoted
        out = self._git(["ls-files", "-z", "--", scope_dir])
        if out is None:
            return []
        files = [path for path in out.split("\0") if path]
        return [f for f in files if regex.search(f)][:MAX_LISTED_FILES]

    def search_content(self, pattern: str, globs: str | Sequence[str] = "*") -> list[str]:
        out = self._git(["grep", "-E", "-I", "-e", pattern, "--", *_as_pathspecs(globs)])
        if out is None:
            return []
        return [line for line in out.splitlines() if line][:MAX_SEARCH_LINES]

    def file_exists(self, rel_path: str) -> bool:
        try:
            return os.path.exists(os.path.join(self.repo_path, rel_path))
        except (OSError, ValueError):
            return False

    def read_file(self, rel_path: str) -> str | None:
        try:
            with open(os.path.join(self.repo_path, rel_path), "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError, ValueError):
            return None

    def secrets_in_history(self) -> bool:
        for keyword in SECRET_KEYWORDS:
            out = self._git(["log", "--all", "--oneline", "-S", keyword])
            if out and out.strip():
                logger.debug("history search: %r introduced in %s", keyword,
                             out.splitlines()[0])
                return True
        return False


class MemoryInspector(Inspector):
    """Inspector over an in-memory snapshot of a repository.

    ``files`` maps tracked relative paths to their content, in listing
    order. ``history`` holds the text of past commit diffs, newest first.
    ``untracked`` holds working-tree files git does not track (e.g. a local
    ``.env``): they exist and can be read but are never listed or searched.
    """

    def __init__(
        self,
        files: Mapping[str, str] | None = None,
        history: Iterable[str] = (),
        untracked: Mapping[str, str] | None = None,
    ) -> None:
        self.files = dict(files or {})
        self.history = list(history)
        self.untracked = dict(untracked or {})

    def _in_scope(self, path: str, scope_dir: str) -> bool:
        scope = scope_dir.strip("/")
        if scope in ("", "."):
            return True
        return path == scope or path.startswith(scope + "/")

    def list_tracked_files(self, pattern: str, scope_dir: str = ".") -> list[str]:
        try:
            regex = re.compile(pattern)
        except re.error:
            return []
        return [
            p for p in self.files
            if self._in_scope(p, scope_dir) and regex.search(p)
        ][:MAX_LISTED_FILES]

    def search_content(self, pattern: str, globs: str | Sequence[str] = "*") -> list[str]:
        try:
            regex = re.compile(pattern)
        except re.error:
            return []
        specs = _as_pathspecs(globs)
        hits: list[str] = []
        for path, content in self.files.items():
            # like git pathspecs, "*" also matches "/"
            if not any(fnmatch.fnmatchcase(path, spec) for spec in specs):
                continue
            for line in content.splitlines():
                if regex.search(line):
                    hits.append(f"{path}:{line}")
                    if len(hits) >= MAX_SEARCH_LINES:
                        return hits
        return hits

    def file_exists(self, rel_path: str) -> bool:
        rel = rel_path.strip("/")
        every = list(self.files) + list(self.untracked)
        return any(p == rel or p.startswith(rel + "/") for p in every)

    def read_file(self, rel_path: str) -> str | None:
        if rel_path in self.files:
            return self.files[rel_path]
        return self.untracked.get(rel_path)

    def secrets_in_history(self) -> bool:
        return any(
            keyword in diff
            for keyword in SECRET_KEYWORDS
            for diff in self.history
        )
