"""Core logic for boohash."""
