#!/usr/bin/env python3
"""
File selection for Palaios

Lists the files of a directory oldest first, filters them by a regular
expression and applies the count policy that decides how many of the
oldest matches are deletion candidates.
"""

import datetime
import os
import pathlib
import re
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from tzlocal import get_localzone

# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class ErrorKind(Enum):
    PATTERN = "pattern"
    NOT_A_DIRECTORY = "not_a_directory"
    IO = "io"
    PARTIAL_DELETION = "partial_deletion"


class PalaiosError(Exception):
    """Base error; ``kind`` tells which stage of a run failed."""

    kind: ErrorKind


class PatternError(PalaiosError):
    kind = ErrorKind.PATTERN


class NotADirectory(PalaiosError):
    kind = ErrorKind.NOT_A_DIRECTORY


class DirectoryReadError(PalaiosError):
    kind = ErrorKind.IO


class PartialDeletionError(PalaiosError):
    kind = ErrorKind.PARTIAL_DELETION


# ---------------------------------------------------------------------------
# Data model
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FileRecord:
    """Snapshot of one directory entry taken at listing time"""

    name: str
    size: int
    mod_time: datetime.datetime
    mtime: float = field(default=0.0, compare=False)

    @classmethod
    def from_stat(cls, name: str, stat: os.stat_result, timezone=None) -> "FileRecord":
        tz = timezone or get_localzone()
        return cls(
            name=name,
            size=stat.st_size,
            mod_time=datetime.datetime.fromtimestamp(stat.st_mtime, tz=tz),
            mtime=stat.st_mtime,
        )


class CountPolicy(Enum):
    ALL = "all"
    KEEP_FIRST_N = "keep_first_n"
    DROP_LAST_N = "drop_last_n"

    @classmethod
    def from_number(cls, number: int) -> "CountPolicy":
        if number > 0:
            return cls.KEEP_FIRST_N
        if number < 0:
            return cls.DROP_LAST_N
        return cls.ALL


@dataclass
class Selection:
    """Records chosen for deletion by the count policy"""

    records: list[FileRecord]
    policy: CountPolicy
    all_kept: bool = False

    def __len__(self) -> int:
        return len(self.records)


# ---------------------------------------------------------------------------
# Pipeline stages
# ---------------------------------------------------------------------------


def program_name() -> str:
    """File name of the running program, never offered for deletion."""
    return pathlib.Path(sys.argv[0]).name


def compile_pattern(pattern: str) -> re.Pattern:
    try:
        return re.compile(pattern)
    except re.error as e:
        raise PatternError(f"failed to compile pattern: {e}") from e


def list_by_time(directory: pathlib.Path, timezone=None) -> list[FileRecord]:
    """List non-directory entries of *directory*, oldest first.

    Entries sharing a modification time are ordered by name. Entries that
    vanish or cannot be stat'ed between listing and stat are skipped.
    """
    directory = pathlib.Path(directory)
    try:
        if not directory.is_dir():
            if directory.exists():
                raise NotADirectory("given path is not a directory")
            raise DirectoryReadError(f"failed to open directory: no such directory: {directory}")
        entries = list(os.scandir(directory))
    except OSError as e:
        raise DirectoryReadError(f"failed to read entries in directory: {e}") from e

    tz = timezone or get_localzone()
    records: list[FileRecord] = []
    for entry in entries:
        try:
            if entry.is_dir(follow_symlinks=False):
                continue
            records.append(FileRecord.from_stat(entry.name, entry.stat(follow_symlinks=False), tz))
        except OSError:
            continue

    records.sort(key=lambda r: (r.mtime, r.name))
    return records


def filter_matches(
    records: list[FileRecord], regex: re.Pattern, self_name: Optional[str] = None
) -> list[FileRecord]:
    """Keep records whose name matches *regex*, excluding the program itself"""
    if self_name is None:
        self_name = program_name()
    return [r for r in records if r.name != self_name and regex.search(r.name)]


def select_by_count(matches: list[FileRecord], number: int) -> Selection:
    """Apply the count policy to oldest-first *matches*

    Positive numbers select the oldest ``number`` files, negative numbers
    keep the newest ``-number`` files and select the rest, zero selects
    everything.
    """
    policy = CountPolicy.from_number(number)

    if policy is CountPolicy.KEEP_FIRST_N:
        return Selection(records=list(matches[:number]), policy=policy)

    if policy is CountPolicy.DROP_LAST_N:
        if len(matches) > -number:
            return Selection(records=list(matches[: len(matches) + number]), policy=policy)
        return Selection(records=[], policy=policy, all_kept=True)

    return Selection(records=list(matches), policy=policy)
