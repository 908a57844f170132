"""Configuration helpers for engine components."""

from __future__ import annotations

import copy
from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Tunable thresholds shared by the snap policy and cycle search."""

    snap_threshold: float = 50.0
    max_cycle_paths: int = 1000
    max_cycle_steps: int = 100_000


_ENGINE_CONFIG = EngineConfig()


def get_engine_config() -> EngineConfig:
    return copy.deepcopy(_ENGINE_CONFIG)


def set_engine_config(config: EngineConfig) -> None:
    if config.snap_threshold <= 1.0:
        raise ValueError("snap_threshold must be greater than 1 so vertical and horizontal snaps stay exclusive")
    if config.max_cycle_paths < 1 or config.max_cycle_steps < 1:
        raise ValueError("cycle search caps must be positive")
    global _ENGINE_CONFIG
    _ENGINE_CONFIG = copy.deepcopy(config)


__all__ = ["EngineConfig", "get_engine_config", "set_engine_config"]
