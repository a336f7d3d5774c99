# Author: PB
# Maintainer: PB
# Original date: 2026.10.19
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/normname/core/normalizer.py

"""
Recursive leaf-name normalization with rename tracking.

Only the final component of each path is ever normalized. Directories are
handled before their contents, so when a directory is renamed its children
are reached through the new name. In a dry run nothing moves on disk; the
projection mapping on the traversal context records where each directory
*would* be, so the paths shown for descendants match a real run.
"""

import os
import stat
from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger

from normname.core.forms import NormalizationForm
from normname.system.exceptions import ListError, NotFoundError, RenameError


@dataclass(frozen=True)
class RenameRecord:
    """One performed (or simulated) rename."""
    original: str
    new: str
    is_dir: bool


RenameCallback = Callable[[RenameRecord], None]


def dir_key(path: str) -> str:
    """Canonical projection key: normalized path ending in exactly one separator."""
    cleaned = os.path.normpath(path)
    if cleaned.endswith(os.sep):
        return cleaned
    return cleaned + os.sep


class TraversalContext:
    """State shared by every call of one invocation, across all root arguments."""

    def __init__(self,
                 form: NormalizationForm,
                 recurse: bool = False,
                 dry_run: bool = False,
                 on_rename: Optional[RenameCallback] = None):
        self.form = form
        self.recurse = recurse
        self.dry_run = dry_run
        self.on_rename = on_rename
        self.projection: dict[str, str] = {}
        self.rename_count = 0
        self.renames: list[RenameRecord] = []

    def project_dir(self, directory: str) -> str:
        """Where `directory` is (or would be) after renames seen so far."""
        return self.projection.get(dir_key(directory), directory)

    def record_dir(self, original: str, new: str) -> None:
        self.projection[dir_key(original)] = dir_key(new)

    def record_rename(self, record: RenameRecord) -> None:
        self.rename_count += 1
        self.renames.append(record)
        if self.on_rename is not None:
            self.on_rename(record)


class PathNormalizer:
    """Normalize the leaf name of a path and, optionally, everything below it."""

    def __init__(self, context: TraversalContext):
        self.context = context

    def process(self, path: str) -> None:
        """Normalize `path` and, for directories with recursion on, its contents.

        Raises:
            NotFoundError: If `path` or a descendant cannot be stat-ed
            RenameError: If a rename fails
            ListError: If a directory cannot be listed
        """
        ctx = self.context

        try:
            st = os.stat(path)
        except OSError as e:
            raise NotFoundError(f"cannot stat {path}: {e.strerror or e}", path=path) from e
        is_dir = stat.S_ISDIR(st.st_mode)

        path = _strip_trailing_sep(path)
        parent, leaf = os.path.split(path)
        normalized_leaf = ctx.form.normalize(leaf)

        # A miss in the projection means no ancestor was renamed.
        effective_parent = ctx.project_dir(parent) if parent else parent
        actual_path = path

        if normalized_leaf == leaf:
            new_path = os.path.join(effective_parent, leaf) if leaf else path
        else:
            new_path = os.path.join(effective_parent, normalized_leaf)
            ctx.record_rename(RenameRecord(original=path, new=new_path, is_dir=is_dir))

            if ctx.dry_run:
                logger.debug(f"[dry-run] would rename {path!r} -> {new_path!r}")
            else:
                self._rename(path, new_path)
                actual_path = new_path

        if not is_dir:
            return

        ctx.record_dir(path, new_path)
        if not ctx.recurse:
            return

        try:
            children = sorted(os.listdir(actual_path))
        except OSError as e:
            raise ListError(f"cannot list {actual_path}: {e.strerror or e}", path=actual_path) from e

        logger.debug(f"Descending into {actual_path!r} ({len(children)} entries)")
        for child in children:
            self.process(os.path.join(actual_path, child))

    def _rename(self, path: str, new_path: str) -> None:
        # On normalization-insensitive filesystems the target "exists" as the same entry.
        if os.path.lexists(new_path) and not _same_entry(path, new_path):
            raise RenameError(f"cannot rename {path} to {new_path}: target exists",
                              path=path, target=new_path)
        try:
            os.rename(path, new_path)
        except OSError as e:
            raise RenameError(f"cannot rename {path} to {new_path}: {e.strerror or e}",
                              path=path, target=new_path) from e
        logger.debug(f"Renamed {path!r} -> {new_path!r}")


def _strip_trailing_sep(path: str) -> str:
    seps = os.sep + (os.altsep or "")
    return path.rstrip(seps) or path


def _same_entry(a: str, b: str) -> bool:
    try:
        return os.path.samestat(os.lstat(a), os.lstat(b))
    except OSError:
        return False


def normalize_paths(paths, context: TraversalContext) -> TraversalContext:
    """Process each root path in order; the first error aborts the rest."""
    normalizer = PathNormalizer(context)
    for path in paths:
        normalizer.process(path)
    return context
