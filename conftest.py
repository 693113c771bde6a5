"""Lets pytest import uriv from a source checkout."""
