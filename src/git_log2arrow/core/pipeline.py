"""End-to-end conversion of commit history into an Arrow IPC stream."""

import logging
from typing import BinaryIO

from git_log2arrow.core.accumulator import collect_batch
from git_log2arrow.core.emitter import StreamEmitter
from git_log2arrow.core.schema import get_arrow_schema
from git_log2arrow.core.source import CommitSource
from git_log2arrow.models.filter import FilterConfig

logger = logging.getLogger(__name__)


def write_log_stream(source: CommitSource, sink: BinaryIO, config: FilterConfig) -> int:
    """Write the filtered commit log of ``source`` to ``sink``.

    The whole batch is built before anything is written, so a repository
    failure leaves the sink untouched. Returns the number of rows written.
    """
    batch = collect_batch(source, config)
    with StreamEmitter(sink, get_arrow_schema()) as emitter:
        emitter.write(batch)
    logger.info("Wrote %d commits", batch.num_rows)
    return batch.num_rows
