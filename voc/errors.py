class VocError(Exception):
    """Base class for every error the command reports before exiting."""


class UsageError(VocError):
    pass


class ConfigError(VocError):
    """An environment override holds a value that cannot be used."""


class FilesystemError(VocError):
    """A path could not be used; carries the path and the OS reason."""

    def __init__(self, path, reason, op="stat"):
        self.path = path
        self.reason = reason
        self.op = op
        super().__init__(f'{op}("{path}") : {reason}')


class NotADatabaseError(FilesystemError):
    def __init__(self, path):
        super().__init__(path, "not a directory")

    def __str__(self):
        return f"Invalid db: {self.path} is not a directory"


class NotAVocabFileError(FilesystemError):
    def __init__(self, path):
        super().__init__(path, "not a regular file")

    def __str__(self):
        return f"{self.path} is not a regular file"


class EmptyDatabaseError(VocError):
    def __init__(self, path):
        self.path = path
        super().__init__(f"invalid db: no regular files in {path}")


# name used by the directory listing helpers
NoRegularFiles = EmptyDatabaseError


class NoEligibleEntryError(VocError):
    def __init__(self, total):
        self.total = total
        super().__init__(
            f"no entry with a word longer than one character among {total} entries"
        )
