"""
Infrastructure utilities

Shared constants and exception types.
"""
