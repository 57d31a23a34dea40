from __future__ import annotations

import logging
import os
import random
from dataclasses import dataclass, field
from typing import Callable

from . import _fsops
from ._config import RunConfig
from ._exceptions import SimulatorIOError
from ._timing import measure

logger = logging.getLogger(__name__)

PROGRESS_EVERY_FILES = 100
PROGRESS_EVERY_DIRS = 10

FOLDER_CREATION = "Folder Creation"
FILE_CREATION = "File Creation"
FILE_READING = "File Reading"
FILE_DELETION = "File Deletion"
FOLDER_DELETION = "Folder Deletion"


@dataclass
class TimingSamples:
    """Per-category durations in nanoseconds, in execution order."""

    folder_creation: list[int] = field(default_factory=list)
    file_creation: list[int] = field(default_factory=list)
    file_reading: list[int] = field(default_factory=list)
    file_deletion: list[int] = field(default_factory=list)
    folder_deletion: list[int] = field(default_factory=list)

    def categories(self) -> list[tuple[str, list[int]]]:
        return [
            (FOLDER_CREATION, self.folder_creation),
            (FILE_CREATION, self.file_creation),
            (FILE_READING, self.file_reading),
            (FILE_DELETION, self.file_deletion),
            (FOLDER_DELETION, self.folder_deletion),
        ]


@dataclass
class RunResult:
    config: RunConfig
    root: str
    samples: TimingSamples
    file_paths: list[str] = field(default_factory=list)
    subfolders: list[str] = field(default_factory=list)
    failed_writes: list[str] = field(default_factory=list)


def _timed(phase: str, path: str, fn: Callable[..., object], *args) -> int:
    try:
        _, elapsed = measure(fn, path, *args)
    except OSError as exc:
        raise SimulatorIOError(phase.lower(), path, exc) from exc
    return elapsed


def _progress(count: int, every: int, message: str) -> None:
    if count % every == 0:
        logger.info(message, count)


def _create_root(config: RunConfig, samples: TimingSamples) -> str:
    root = os.path.join(config.root_path, _fsops.make_root_name())
    samples.folder_creation.append(_timed(FOLDER_CREATION, root, _fsops.make_root))
    logger.info("Created root folder: %s", root)
    return root


def _generate(result: RunResult, rng: random.Random) -> None:
    config = result.config
    samples = result.samples
    attempted = 0
    for i in range(config.num_subfolders):
        subfolder = os.path.join(result.root, _fsops.subfolder_name(i))
        samples.folder_creation.append(
            _timed(FOLDER_CREATION, subfolder, _fsops.make_dir)
        )
        result.subfolders.append(subfolder)

        for j in range(config.files_per_subfolder):
            path = os.path.join(subfolder, _fsops.file_name(j))
            payload = _fsops.random_payload(config.file_size, rng)
            if config.strict_writes:
                samples.file_creation.append(
                    _timed(FILE_CREATION, path, _fsops.write_file, payload)
                )
            else:
                try:
                    _, elapsed = measure(_fsops.write_file, path, payload)
                except OSError as exc:
                    # Tolerated: the path stays in the list, so the read
                    # phase reports the missing file.
                    logger.error("Error writing file %s: %s", path, exc)
                    result.failed_writes.append(path)
                else:
                    samples.file_creation.append(elapsed)
            result.file_paths.append(path)

            attempted += 1
            _progress(
                attempted, PROGRESS_EVERY_FILES, "File creation progress: %d files created"
            )


def _read_all(result: RunResult) -> None:
    for count, path in enumerate(result.file_paths, start=1):
        result.samples.file_reading.append(_timed(FILE_READING, path, _fsops.read_file))
        _progress(count, PROGRESS_EVERY_FILES, "File reading progress: %d files read")


def _delete_files(result: RunResult) -> None:
    for count, path in enumerate(result.file_paths, start=1):
        result.samples.file_deletion.append(
            _timed(FILE_DELETION, path, _fsops.remove_file)
        )
        _progress(count, PROGRESS_EVERY_FILES, "File deletion progress: %d files deleted")


def _delete_dirs(result: RunResult) -> None:
    # Files are gone by now and the layout is flat, so every subfolder is empty.
    for count, subfolder in enumerate(reversed(result.subfolders), start=1):
        result.samples.folder_deletion.append(
            _timed(FOLDER_DELETION, subfolder, _fsops.remove_dir)
        )
        _progress(count, PROGRESS_EVERY_DIRS, "Folder deletion progress: %d folders deleted")
    result.samples.folder_deletion.append(
        _timed(FOLDER_DELETION, result.root, _fsops.remove_dir)
    )
    logger.info("Removed root folder: %s", result.root)


def run_benchmark(config: RunConfig) -> RunResult:
    """Run every phase once, in order, and return the collected samples.

    Any :class:`SimulatorIOError` aborts the run and leaves already created
    entries on disk. A failed file write is only fatal when
    ``config.strict_writes`` is set.
    """
    rng = random.Random(config.seed)
    samples = TimingSamples()
    root = _create_root(config, samples)
    result = RunResult(config=config, root=root, samples=samples)

    _generate(result, rng)
    _read_all(result)
    _delete_files(result)
    if config.cleanup:
        _delete_dirs(result)
    else:
        logger.info("Cleanup disabled, leaving folders under %s", root)
    return result
