"""Runtime configuration for the duel game."""
