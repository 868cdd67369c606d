"""Kida integration, built-in template helpers and stream envelopes."""
