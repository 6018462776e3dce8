"""Commit record model decoded from a repository."""

from typing import List

from pydantic import BaseModel


class Signature(BaseModel):
    """Author or committer identity with a seconds-since-epoch timestamp."""

    name: str
    email: str
    timestamp: int

    model_config = {"frozen": True}


class CommitRecord(BaseModel):
    """A single commit as read from the object store."""

    commit_id: str
    message: bytes  # Raw bytes, decoded only when appended to a batch
    author: Signature
    committer: Signature
    parent_ids: List[str] = []

    model_config = {"frozen": True}
