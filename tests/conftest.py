"""Shared fixtures: an in-memory commit graph and a real git repository."""

from pathlib import Path
from typing import Dict, Iterator, List

import pytest
from git import Actor, Repo

from git_log2arrow.models.commit import CommitRecord, Signature

C1 = "c1" * 20
C2 = "c2" * 20
C3 = "c3" * 20


class InMemoryCommitSource:
    """Deterministic CommitSource over a fixed commit DAG."""

    def __init__(self, commits: List[CommitRecord], head: str):
        self.commits: Dict[str, CommitRecord] = {c.commit_id: c for c in commits}
        self.head = head
        self.reads: List[str] = []

    def head_id(self) -> str:
        return self.head

    def ancestors(self, start_id: str) -> Iterator[str]:
        # Breadth-first, each commit once
        seen = set()
        queue = [start_id]
        while queue:
            commit_id = queue.pop(0)
            if commit_id in seen:
                continue
            seen.add(commit_id)
            yield commit_id
            queue.extend(self.commits[commit_id].parent_ids)

    def read_commit(self, commit_id: str) -> CommitRecord:
        self.reads.append(commit_id)
        return self.commits[commit_id]


def make_commit(commit_id, author="Alice", timestamp=0, parents=(), message=b"msg\n"):
    """Helper to build a CommitRecord with sensible defaults."""
    return CommitRecord(
        commit_id=commit_id,
        message=message,
        author=Signature(
            name=author, email=f"{author.lower()}@example.com", timestamp=timestamp
        ),
        committer=Signature(
            name="Committer", email="committer@example.com", timestamp=timestamp + 5
        ),
        parent_ids=list(parents),
    )


@pytest.fixture
def three_commit_source():
    """C1 -> C2 -> C3 with HEAD at C3; only C2 is authored by Bob."""
    commits = [
        make_commit(C1, "Alice", 1000, message=b"First commit\n"),
        make_commit(C2, "Bob", 2000, parents=[C1], message=b"Second commit\n\n"),
        make_commit(C3, "Alice", 3000, parents=[C2], message=b"Third commit"),
    ]
    return InMemoryCommitSource(commits, head=C3)


@pytest.fixture
def git_history(tmp_path):
    """Create a real repository with a merge commit.

    Returns the repo plus its commits keyed by name: root, main, side, merge.
    """
    repo_path = Path(tmp_path) / "project"
    repo = Repo.init(repo_path)
    with repo.config_writer() as config:
        config.set_value("user", "name", "Test User")
        config.set_value("user", "email", "test@example.com")

    alice = Actor("Alice", "alice@example.com")
    bob = Actor("Bob", "bob@example.com")

    def commit(message, author, timestamp, **kwargs):
        date = f"{timestamp} +0000"
        return repo.index.commit(
            message,
            author=author,
            committer=author,
            author_date=date,
            commit_date=date,
            **kwargs,
        )

    (repo_path / "README.md").write_text("# Test Project\n")
    repo.index.add(["README.md"])
    root = commit("Initial commit\n", alice, 1000)

    (repo_path / "main.py").write_text("print('hello')\n")
    repo.index.add(["main.py"])
    main = commit("Add main\n\nWith a body.\n", bob, 2000)

    side = commit("Side work\n", alice, 1500, parent_commits=[root], head=False)
    merge = commit("Merge side\n", alice, 3000, parent_commits=[main, side])

    yield repo, {"root": root, "main": main, "side": side, "merge": merge}
    repo.close()
