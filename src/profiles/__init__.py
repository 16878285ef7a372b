"""Language profile sources.

This module reads persisted per-language n-gram statistics.
"""
