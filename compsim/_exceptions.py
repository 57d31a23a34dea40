class ParameterError(ValueError):
    """Raised when a command line parameter is not a valid non-negative integer."""
    def __init__(self, name: str, value: str, reason: str = "not an integer") -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name} {value!r}: {reason}.")


class SimulatorIOError(OSError):
    """Raised when a filesystem operation aborts the run. Subclass of OSError.

    ``phase`` names the operation category and ``path`` the entry that
    failed. ``errno`` is copied from the underlying error.
    """
    def __init__(self, phase: str, path: str, cause: OSError) -> None:
        self.phase = phase
        self.path = path
        message = f"{phase} failed for {path}: {cause.strerror or cause}"
        if cause.errno is None:
            super().__init__(message)
        else:
            super().__init__(cause.errno, message)
