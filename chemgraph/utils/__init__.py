"""Conversion, feature detection, logging and random number helpers."""
