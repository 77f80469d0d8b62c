"""Partitioning of sorted records into per-category files."""
