"""Data models for records, queries, hits and results."""
