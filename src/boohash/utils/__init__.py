"""Small helpers shared across boohash modules."""
