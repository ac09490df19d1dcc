"""
Library-wide settings.

Usage:
    >>> import lazyseq
    >>> lazyseq.configure(random_seed=42, enable_logging=True)
"""

import logging
from dataclasses import dataclass, fields
from typing import Optional

import numpy as np


@dataclass
class Settings:
    """Mutable library settings."""
    random_seed: Optional[int] = None
    enable_logging: bool = False


settings = Settings()


def configure(**kwargs) -> Settings:
    """Update the global settings and return them."""
    known = {f.name for f in fields(Settings)}
    for name, value in kwargs.items():
        if name not in known:
            raise ValueError(f"Unknown setting: {name!r}")
        setattr(settings, name, value)

    if settings.enable_logging:
        logging.basicConfig(level=logging.DEBUG)

    return settings


def default_rng() -> np.random.Generator:
    """Random generator used by ``shuffle()`` when no rng is given."""
    return np.random.default_rng(settings.random_seed)
