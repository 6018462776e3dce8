"""Arrow IPC stream output."""

import logging
from typing import BinaryIO

import pyarrow as pa

from git_log2arrow.errors import EncodingError, SinkWriteError

logger = logging.getLogger(__name__)

# Continuation token followed by a zero metadata length
END_OF_STREAM = b"\xff\xff\xff\xff\x00\x00\x00\x00"

_SINK_ERRORS = (OSError, pa.ArrowException)


class StreamEmitter:
    """Writes a schema header, one record batch and an end-of-stream marker.

    Each frame is an encapsulated IPC message, so the header reaches the sink
    as soon as the emitter is constructed.
    """

    def __init__(self, sink: BinaryIO, schema: pa.Schema):
        self.sink = sink
        self.schema = schema
        self._batches_written = 0
        self._finished = False
        self._write_frame(schema.serialize(), "stream header")

    def __enter__(self) -> "StreamEmitter":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if exc_type is None:
            self.finish()

    def _write_frame(self, frame, what: str) -> None:
        try:
            self.sink.write(frame)
        except _SINK_ERRORS as e:
            raise SinkWriteError(f"Failed to write {what}: {e}") from e

    def write(self, batch: pa.RecordBatch) -> None:
        """Write the single record batch of this stream."""
        if self._finished:
            raise EncodingError("Stream is already finished")
        if self._batches_written:
            raise EncodingError("Stream accepts exactly one record batch")
        if not batch.schema.equals(self.schema):
            raise EncodingError("Record batch schema does not match stream schema")

        try:
            frame = batch.serialize()
        except pa.ArrowException as e:
            raise EncodingError(f"Failed to encode record batch: {e}") from e
        self._write_frame(frame, "record batch")
        self._batches_written += 1
        logger.debug("Wrote record batch with %d rows", batch.num_rows)

    def finish(self) -> None:
        """Write the end-of-stream marker and flush the sink."""
        if self._finished:
            return
        self._finished = True
        self._write_frame(END_OF_STREAM, "end-of-stream marker")
        try:
            self.sink.flush()
        except _SINK_ERRORS as e:
            raise SinkWriteError(f"Failed to flush stream: {e}") from e
