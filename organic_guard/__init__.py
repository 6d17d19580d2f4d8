"""Biophysical risk envelopes, neurorights enforcement, sovereign identity and guarded device access."""

__version__ = "0.1.0a0"