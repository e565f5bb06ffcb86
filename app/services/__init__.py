"""
Services Layer

Business logic over the in-memory store. Services raise the exceptions in
app.infrastructure.exceptions and return response envelopes on success.
"""

__all__ = []
