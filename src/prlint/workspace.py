# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Scratch workspace holding staged copies of the files under review."""

from __future__ import annotations

import hashlib
import logging
import shutil
import tempfile
from collections.abc import Iterable, Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path, PurePosixPath

from .constants import WORKSPACE_PREFIX
from .errors import StagingError
from .languages import ANALYZED_LANGUAGES, LanguageClass, detect_language
from .models import SourceFile

LOGGER = logging.getLogger(__name__)

_PATH_HASH_LENGTH = 8


@dataclass(slots=True)
class StagedWorkspace:
    """Files of one run materialised in a private directory, grouped by language."""

    root: Path
    files: dict[LanguageClass, list[Path]] = field(default_factory=dict)
    origins: dict[str, str] = field(default_factory=dict)

    def files_for(self, language: LanguageClass) -> tuple[Path, ...]:
        return tuple(self.files.get(language, ()))

    @property
    def languages(self) -> tuple[LanguageClass, ...]:
        """Return staged languages in invocation order."""
        return tuple(language for language in ANALYZED_LANGUAGES if self.files.get(language))

    @property
    def missing_languages(self) -> tuple[LanguageClass, ...]:
        return tuple(language for language in ANALYZED_LANGUAGES if not self.files.get(language))

    @property
    def staged_count(self) -> int:
        return sum(len(paths) for paths in self.files.values())

    def original_path(self, reported: str) -> str:
        """Map a path reported by a tool back to the caller's original path.

        Tools report staged files as absolute paths, ``./name`` or bare names;
        anything that does not resolve to a staged file is returned unchanged.
        """

        if not reported:
            return reported
        name = PurePosixPath(reported.replace("\\", "/")).name
        origin = self.origins.get(name)
        if origin is None:
            return reported
        candidate = Path(reported)
        if candidate.is_absolute() and candidate.parent.resolve() != self.root.resolve():
            return reported
        return origin

    def stage(self, source: SourceFile) -> Path | None:
        """Write *source* into the workspace; return ``None`` for unknown languages.

        Raises:
            StagingError: If the file cannot be written.
        """

        language = detect_language(source.path)
        if language is LanguageClass.UNKNOWN:
            LOGGER.debug("skipping %s: no analyzer for its extension", source.path)
            return None
        staged_name = self._staged_name(source.path)
        target = self.root / staged_name
        try:
            target.write_bytes(source.content)
        except OSError as exc:
            raise StagingError(f"failed to write file {source.path}: {exc}") from exc
        if self.origins.get(staged_name) != source.path:
            self.origins[staged_name] = source.path
            self.files.setdefault(language, []).append(target)
        return target

    def _staged_name(self, path: str) -> str:
        """Return a collision-free base name for *path*.

        The first file keeps its base name; later files sharing the base name
        but not the original path get a short path hash before the suffix.
        """

        pure = PurePosixPath(path.replace("\\", "/"))
        name = pure.name
        owner = self.origins.get(name)
        if owner is None or owner == path:
            return name
        digest = hashlib.sha1(path.encode("utf-8"), usedforsecurity=False).hexdigest()[:_PATH_HASH_LENGTH]
        return f"{pure.stem}-{digest}{pure.suffix}"


@contextmanager
def stage_workspace(
    files: Iterable[SourceFile],
    *,
    prefix: str = WORKSPACE_PREFIX,
    base_dir: Path | None = None,
) -> Iterator[StagedWorkspace]:
    """Stage *files* into a fresh temporary directory removed on every exit path.

    Args:
        files: Changed files supplied by the caller.
        prefix: Prefix for the temporary directory name.
        base_dir: Parent directory for the workspace; defaults to the system temp dir.

    Yields:
        StagedWorkspace: Workspace populated with every recognised file.

    Raises:
        StagingError: If the directory cannot be created or any file written.
    """

    try:
        root = Path(tempfile.mkdtemp(prefix=prefix, dir=str(base_dir) if base_dir is not None else None))
    except OSError as exc:
        raise StagingError(f"failed to create temp directory: {exc}") from exc
    try:
        workspace = StagedWorkspace(root=root)
        for source in files:
            workspace.stage(source)
        LOGGER.debug("staged %d file(s) into %s", workspace.staged_count, root)
        yield workspace
    finally:
        shutil.rmtree(root, ignore_errors=True)


__all__ = ["StagedWorkspace", "stage_workspace"]
