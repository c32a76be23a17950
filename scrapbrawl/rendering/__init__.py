"""Pygame presentation of the duel."""
