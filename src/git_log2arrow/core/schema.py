"""Fixed Arrow schema of the commit log stream."""

import pyarrow as pa

COLUMN_NAMES = (
    "commit_hash",
    "message",
    "author_name",
    "author_email",
    "author_timestamp",
    "committer_name",
    "committer_email",
    "committer_timestamp",
    "parent_hashes",
)


def get_arrow_schema() -> pa.Schema:
    """Return the nine-column commit schema.

    Every field is non-nullable; only the items of ``parent_hashes`` are
    declared nullable.
    """
    timestamp = pa.timestamp("s")
    return pa.schema(
        [
            pa.field("commit_hash", pa.string(), nullable=False),
            pa.field("message", pa.string(), nullable=False),
            pa.field("author_name", pa.string(), nullable=False),
            pa.field("author_email", pa.string(), nullable=False),
            pa.field("author_timestamp", timestamp, nullable=False),
            pa.field("committer_name", pa.string(), nullable=False),
            pa.field("committer_email", pa.string(), nullable=False),
            pa.field("committer_timestamp", timestamp, nullable=False),
            pa.field(
                "parent_hashes",
                pa.list_(pa.field("item", pa.string(), nullable=True)),
                nullable=False,
            ),
        ]
    )
