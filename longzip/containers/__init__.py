"""Containers and views over groups of sequences."""
