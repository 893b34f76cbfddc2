"""Shared type aliases used across multivalue modules."""

from collections.abc import Hashable
from typing import TypeAlias

# Bucket — the insertion-ordered set of values held under one key
type Bucket[V: Hashable] = dict[V, None]

# Text pair as read by the CLI (key, value)
TextPair: TypeAlias = tuple[str, str]
