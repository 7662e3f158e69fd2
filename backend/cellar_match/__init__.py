"""Cellar Match: wine catalog resolution and food pairing ranking."""
