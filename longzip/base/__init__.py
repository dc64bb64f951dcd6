"""Basic language extensions."""
