"""Zip any number of sequences out to the length of the longest one."""
