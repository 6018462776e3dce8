"""Error types raised by the log-to-Arrow pipeline."""


class GitLogArrowError(Exception):
    """Base class for every failure inside the pipeline."""


class RepositoryAccessError(GitLogArrowError):
    """The repository, its head, or one of its commit objects is unreadable."""


class EncodingError(GitLogArrowError):
    """A schema or record batch could not be built or written."""


class SinkWriteError(GitLogArrowError):
    """Writing to the output sink failed."""
