"""Filesystem primitives used by the runner.

Each function acquires and releases its own handle; nothing is held open
between calls.
"""
import os
import random
import uuid

ROOT_PREFIX = "compiler_sim_"


def make_root_name() -> str:
    return ROOT_PREFIX + str(uuid.uuid4())


def subfolder_name(index: int) -> str:
    return f"subfolder_{index}"


def file_name(index: int) -> str:
    return f"file_{index}.dat"


def random_payload(size: int, rng: random.Random) -> bytes:
    # Uniform bytes, not suitable for anything security related.
    return rng.randbytes(size)


def make_root(path: str) -> None:
    """Create ``path`` and any missing parents. An existing directory is an error."""
    os.makedirs(path)


def make_dir(path: str) -> None:
    os.mkdir(path)


def write_file(path: str, data: bytes) -> None:
    with open(path, "wb") as f:
        f.write(data)


def read_file(path: str) -> bytes:
    with open(path, "rb") as f:
        return f.read()


def remove_file(path: str) -> None:
    os.remove(path)


def remove_dir(path: str) -> None:
    os.rmdir(path)
