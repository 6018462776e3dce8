"""Commit filter predicate."""

from git_log2arrow.models.commit import CommitRecord
from git_log2arrow.models.filter import FilterConfig


def accepts(record: CommitRecord, config: FilterConfig) -> bool:
    """Return True when ``record`` passes every filter set in ``config``."""
    if config.author is not None and record.author.name != config.author:
        return False
    if config.since is not None and record.author.timestamp < config.since:
        return False
    # Equal to until is still inside the range
    if config.until is not None and record.author.timestamp > config.until:
        return False
    return True
