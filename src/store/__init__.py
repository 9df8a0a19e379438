"""Storage layer.

This module persists user records into SQLite and exposes the
read, count and clear operations used by the SDK.
"""
