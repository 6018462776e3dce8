"""Commit sources: where commits to encode come from."""

import logging
from pathlib import Path
from typing import Iterator, Optional, Protocol, Union

import git
from git import Repo

from git_log2arrow.errors import RepositoryAccessError
from git_log2arrow.models.commit import CommitRecord, Signature

logger = logging.getLogger(__name__)

_GIT_ERRORS = (ValueError, git.exc.GitError, git.exc.ODBError)


class CommitSource(Protocol):
    """Anything that can resolve a head and walk its ancestors."""

    def head_id(self) -> str:
        """Return the id of the commit currently checked out."""
        ...

    def ancestors(self, start_id: str) -> Iterator[str]:
        """Yield ids reachable from ``start_id``, starting with it."""
        ...

    def read_commit(self, commit_id: str) -> CommitRecord:
        """Load one commit's fields from the object store."""
        ...


def split_raw_message(raw: bytes) -> bytes:
    """Return the message part of a raw commit object.

    Headers end at the first empty line; continuation lines of multi-line
    headers such as ``gpgsig`` always start with a space.
    """
    _, separator, message = raw.partition(b"\n\n")
    return message if separator else b""


class GitCommitSource:
    """CommitSource backed by a GitPython repository."""

    def __init__(self, repo: Repo):
        self.repo = repo
        # Commit most recently yielded by ancestors(), reused by read_commit()
        self._last_yielded: Optional[git.Commit] = None

    @classmethod
    def discover(cls, path: Union[str, Path] = ".") -> "GitCommitSource":
        """Open the repository containing ``path``."""
        try:
            repo = Repo(Path(path), search_parent_directories=True)
        except (git.exc.InvalidGitRepositoryError, git.exc.NoSuchPathError) as e:
            raise RepositoryAccessError(f"Not a git repository: {path}") from e
        logger.debug("Opened repository at %s", repo.git_dir)
        return cls(repo)

    def head_id(self) -> str:
        try:
            return self.repo.head.commit.hexsha
        except _GIT_ERRORS as e:
            raise RepositoryAccessError(f"Cannot resolve HEAD: {e}") from e

    def ancestors(self, start_id: str) -> Iterator[str]:
        try:
            for commit in self.repo.iter_commits(start_id):
                self._last_yielded = commit
                yield commit.hexsha
        except _GIT_ERRORS as e:
            raise RepositoryAccessError(
                f"Cannot walk ancestors of {start_id}: {e}"
            ) from e

    def read_commit(self, commit_id: str) -> CommitRecord:
        try:
            commit = self._last_yielded
            if commit is None or commit.hexsha != commit_id:
                commit = self.repo.commit(commit_id)
            raw = commit.data_stream.read()
            return CommitRecord(
                commit_id=commit.hexsha,
                message=split_raw_message(raw),
                author=Signature(
                    name=commit.author.name or "",
                    email=commit.author.email or "",
                    timestamp=commit.authored_date,
                ),
                committer=Signature(
                    name=commit.committer.name or "",
                    email=commit.committer.email or "",
                    timestamp=commit.committed_date,
                ),
                parent_ids=[parent.hexsha for parent in commit.parents],
            )
        except _GIT_ERRORS as e:
            raise RepositoryAccessError(f"Cannot read commit {commit_id}: {e}") from e
