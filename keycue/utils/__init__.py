"""Utility helpers for keycue."""

from .key_sequences import (
    format_key_sequence,
    is_modifier,
    join_key_sequence,
    normalize_token,
    order_tokens,
    split_key_sequence,
)

__all__ = [
    "format_key_sequence",
    "is_modifier",
    "join_key_sequence",
    "normalize_token",
    "order_tokens",
    "split_key_sequence",
]
