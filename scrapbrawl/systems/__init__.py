"""Offline analysis over generated bodies."""
