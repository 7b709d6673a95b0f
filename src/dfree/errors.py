class DfreeError(Exception):
    """Base class for errors reported to the user."""


class ConfigError(DfreeError):
    pass


class MountTableError(DfreeError):
    """The mount table could not be read."""


class MountParseError(MountTableError):
    """A mount table line is malformed."""

    def __init__(self, message: str, line_number: int = 0, line: str = ""):
        self.line_number = line_number
        self.line = line
        if line_number:
            message = f"Failed to parse mount line {line_number}: {message}"
        super().__init__(message)
