"""Configuration helpers for the batching optimizer."""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import Optional


@dataclass
class BatchingConfig:
    """Tuning knobs shared by the batch matcher and the tree splitter."""

    # Don't attempt to optimize for batching if the form is smaller than this.
    batch_length_threshold: int = 100
    # Maximum L1 distance (mm) between offsets to be considered redundant.
    offset_redundancy_threshold: float = 0.05
    # Group split indices by accumulated hash only, without checking equality.
    group_by_hash: bool = False
    # Count distinct property values exactly instead of stopping at the cap.
    exact_unique_count: bool = False
    # Drop near-duplicate offsets from batches produced at draw time.
    filter_offsets: bool = False


_BATCHING_CONFIG = BatchingConfig()


def get_batching_config() -> BatchingConfig:
    return copy.deepcopy(_BATCHING_CONFIG)


def set_batching_config(config: BatchingConfig) -> None:
    global _BATCHING_CONFIG
    _BATCHING_CONFIG = copy.deepcopy(config)


def resolve_config(config: Optional[BatchingConfig]) -> BatchingConfig:
    """Return ``config`` or the process-wide default when it is ``None``."""

    if config is None:
        return get_batching_config()
    return config
