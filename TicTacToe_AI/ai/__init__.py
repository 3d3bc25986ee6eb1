"""Minimax search for the automated side."""
