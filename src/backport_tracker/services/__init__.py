"""Backport verification, filtering, completion sync and card derivation."""
