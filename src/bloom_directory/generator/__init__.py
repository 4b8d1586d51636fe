"""Deterministic synthetic dataset generation."""

from . import random_source, picker, records, dataset

__all__ = ["random_source", "picker", "records", "dataset"]
