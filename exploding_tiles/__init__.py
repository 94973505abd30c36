"""Exploding Tiles: a chain-reaction board game on a triangulated hexagon."""
