from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from ._exceptions import ParameterError

DEFAULT_ROOT_PATH = "."
DEFAULT_FILE_SIZE = 1024
DEFAULT_NUM_SUBFOLDERS = 30
DEFAULT_FILES_PER_SUBFOLDER = 500

_NUMERIC_PARAMETERS = ("file_size", "num_subfolders", "files_per_subfolder")


def parse_count(name: str, raw: str) -> int:
    try:
        value = int(raw)
    except ValueError:
        raise ParameterError(name, raw) from None
    if value < 0:
        raise ParameterError(name, raw, "must not be negative")
    return value


@dataclass(frozen=True)
class RunConfig:
    root_path: str = DEFAULT_ROOT_PATH
    file_size: int = DEFAULT_FILE_SIZE
    num_subfolders: int = DEFAULT_NUM_SUBFOLDERS
    files_per_subfolder: int = DEFAULT_FILES_PER_SUBFOLDER
    cleanup: bool = True
    strict_writes: bool = False
    seed: int | None = None

    @classmethod
    def from_positional(cls, args: Sequence[str], **options) -> RunConfig:
        """Build a config from up to four positional strings.

        The order is root path, file size in bytes, subfolder count and files
        per subfolder. Missing trailing values keep their defaults. Keyword
        ``options`` are passed through to the constructor unchanged.
        """
        if len(args) > 1 + len(_NUMERIC_PARAMETERS):
            raise ParameterError(
                "argument list", " ".join(args), "at most four positional arguments"
            )
        values: dict[str, object] = {}
        if args:
            values["root_path"] = args[0]
        for name, raw in zip(_NUMERIC_PARAMETERS, args[1:]):
            values[name] = parse_count(name, raw)
        return cls(**values, **options)

    @property
    def total_files(self) -> int:
        return self.num_subfolders * self.files_per_subfolder
