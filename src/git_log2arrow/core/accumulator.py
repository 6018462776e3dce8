"""Row-by-row construction of the commit record batch."""

import logging
from typing import List

import pyarrow as pa

from git_log2arrow.core.filters import accepts
from git_log2arrow.core.schema import get_arrow_schema
from git_log2arrow.core.source import CommitSource
from git_log2arrow.errors import EncodingError
from git_log2arrow.models.commit import CommitRecord
from git_log2arrow.models.filter import FilterConfig

logger = logging.getLogger(__name__)


def decode_message(message: bytes, trim_message: bool = False) -> str:
    """Decode raw message bytes as UTF-8, replacing invalid sequences."""
    if trim_message:
        message = message.rstrip(b"\r\n")
    return message.decode("utf-8", errors="replace")


class CommitColumns:
    """One growable column per schema field, appended in lock-step."""

    def __init__(self, trim_message: bool = False):
        self.trim_message = trim_message
        self.schema = get_arrow_schema()
        self._finished = False

        self.commit_hash: List[str] = []
        self.message: List[str] = []
        self.author_name: List[str] = []
        self.author_email: List[str] = []
        self.author_timestamp: List[int] = []
        self.committer_name: List[str] = []
        self.committer_email: List[str] = []
        self.committer_timestamp: List[int] = []
        self.parent_hashes: List[List[str]] = []

    def __len__(self) -> int:
        return len(self.commit_hash)

    def append_row(self, record: CommitRecord) -> None:
        """Append one commit to every column."""
        if self._finished:
            raise EncodingError("Cannot append to a finished batch")

        self.commit_hash.append(record.commit_id)
        self.message.append(decode_message(record.message, self.trim_message))
        self.author_name.append(record.author.name)
        self.author_email.append(record.author.email)
        self.author_timestamp.append(record.author.timestamp)
        self.committer_name.append(record.committer.name)
        self.committer_email.append(record.committer.email)
        self.committer_timestamp.append(record.committer.timestamp)
        # Root commits get an empty list, never null
        self.parent_hashes.append(list(record.parent_ids))

    def finish(self) -> pa.RecordBatch:
        """Build the record batch and release the column buffers."""
        if self._finished:
            raise EncodingError("Batch has already been finished")
        self._finished = True

        columns = [getattr(self, field.name) for field in self.schema]
        try:
            arrays = [
                pa.array(values, type=field.type)
                for values, field in zip(columns, self.schema)
            ]
            batch = pa.RecordBatch.from_arrays(arrays, schema=self.schema)
        except (pa.ArrowException, TypeError, ValueError) as e:
            raise EncodingError(f"Failed to build record batch: {e}") from e

        for values in columns:
            values.clear()
        return batch


def collect_batch(source: CommitSource, config: FilterConfig) -> pa.RecordBatch:
    """Walk ancestors of HEAD and encode the accepted commits as one batch.

    Stops as soon as ``config.max_count`` commits have been accepted; rejected
    commits do not count towards the limit.
    """
    columns = CommitColumns(trim_message=config.trim_message)
    head_id = source.head_id()
    logger.debug("Walking ancestors of %s", head_id)

    visited = 0
    for commit_id in source.ancestors(head_id):
        visited += 1
        record = source.read_commit(commit_id)
        if not accepts(record, config):
            continue
        columns.append_row(record)
        if len(columns) >= config.max_count:
            break

    logger.debug("Visited %d commits, accepted %d", visited, len(columns))
    return columns.finish()
