"""Data models for Git Log2Arrow."""

from .commit import CommitRecord, Signature
from .filter import FilterConfig, parse_rfc3339

__all__ = ["CommitRecord", "Signature", "FilterConfig", "parse_rfc3339"]
