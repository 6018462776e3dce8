"""Traversal, filtering and Arrow encoding of commit history."""
