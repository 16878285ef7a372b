"""Language detection engine.

This module holds n-gram extraction, profile aggregation, and the
randomized Bayesian estimator that ranks candidate languages.
"""
