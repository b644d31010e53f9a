"""
solarpos.cache - Memoisation control for solar calculators

Zero-config: every SolarCalculator memoises its last result unless
caching is switched off here or through the environment.

Environment variables (read once at import):
    SOLARPOS_CACHE_DISABLED: '1', 'true' or 'yes' disables memoisation
    SOLARPOS_RANGE_WARNINGS: '0', 'false' or 'no' silences warnings
        about inputs outside the documented accuracy range

Copyright (c) 2024-2026 tkykszk

This software is licensed under the MIT License.
See LICENSE file for details.
"""

import os
import threading
from contextlib import contextmanager

__all__ = [
    'cache_disabled',
    'disable_cache',
    'disable_range_warnings',
    'enable_cache',
    'enable_range_warnings',
    'get_cache_info',
    'is_cache_enabled',
    'is_range_warnings_enabled',
    'reset_cache_stats',
    'show_cache_status',
]

_TRUE_VALUES = ('1', 'true', 'yes')
_FALSE_VALUES = ('0', 'false', 'no')


# =============================================================================
# Global State
# =============================================================================

class _CacheState:
    """Thread-safe cache state manager."""

    def __init__(self):
        self._lock = threading.Lock()
        self._global_enabled = True
        self._range_warnings = True
        self._hits = 0
        self._misses = 0

        # Read environment variables
        self._init_from_env()

    def _init_from_env(self):
        """Initialize state from environment variables."""
        disabled = os.environ.get('SOLARPOS_CACHE_DISABLED', '').lower()
        if disabled in _TRUE_VALUES:
            self._global_enabled = False

        warnings_flag = os.environ.get('SOLARPOS_RANGE_WARNINGS', '').lower()
        if warnings_flag in _FALSE_VALUES:
            self._range_warnings = False

    @property
    def global_enabled(self) -> bool:
        with self._lock:
            return self._global_enabled

    @global_enabled.setter
    def global_enabled(self, value: bool):
        with self._lock:
            self._global_enabled = value

    @property
    def range_warnings(self) -> bool:
        with self._lock:
            return self._range_warnings

    @range_warnings.setter
    def range_warnings(self, value: bool):
        with self._lock:
            self._range_warnings = value

    def record_hit(self):
        with self._lock:
            self._hits += 1

    def record_miss(self):
        with self._lock:
            self._misses += 1

    def stats(self) -> tuple[int, int]:
        with self._lock:
            return self._hits, self._misses

    def reset_stats(self):
        with self._lock:
            self._hits = 0
            self._misses = 0


# Global state instance
_state = _CacheState()


# =============================================================================
# Enable/Disable Functions
# =============================================================================

def enable_cache() -> None:
    """Enable memoisation for all calculators."""
    _state.global_enabled = True


def disable_cache() -> None:
    """Disable memoisation for all calculators."""
    _state.global_enabled = False


def is_cache_enabled() -> bool:
    """Check if memoisation is globally enabled.

    Returns
    -------
    bool
        True if caching is enabled
    """
    return _state.global_enabled


def enable_range_warnings() -> None:
    """Warn about inputs outside the documented accuracy range."""
    _state.range_warnings = True


def disable_range_warnings() -> None:
    """Stop warning about inputs outside the documented accuracy range."""
    _state.range_warnings = False


def is_range_warnings_enabled() -> bool:
    return _state.range_warnings


# =============================================================================
# Context Managers
# =============================================================================

@contextmanager
def cache_disabled():
    """Context manager to temporarily disable memoisation.

    Example
    -------
    >>> with cache_disabled():
    ...     calc.elevation(t)  # always recomputed
    """
    prev_state = _state.global_enabled
    _state.global_enabled = False
    try:
        yield
    finally:
        _state.global_enabled = prev_state


# =============================================================================
# Status Functions
# =============================================================================

def get_cache_info() -> dict:
    """Get memoisation statistics.

    Returns
    -------
    dict
        'enabled', 'hits' and 'misses' counted across all calculators
    """
    hits, misses = _state.stats()
    return {
        'enabled': _state.global_enabled,
        'hits': hits,
        'misses': misses,
    }


def reset_cache_stats() -> None:
    """Reset the hit and miss counters."""
    _state.reset_stats()


def show_cache_status() -> None:
    """Print cache status to stdout."""
    info = get_cache_info()
    total = info['hits'] + info['misses']
    ratio = f"{100.0 * info['hits'] / total:.1f} %" if total else '-'

    print(f"{'Hits':>10} {'Misses':>10} {'Hit ratio':>10}")
    print("-" * 32)
    print(f"{info['hits']:>10} {info['misses']:>10} {ratio:>10}")
    print()
    print(f"Cache enabled: {info['enabled']}")
    print(f"Range warnings: {_state.range_warnings}")
