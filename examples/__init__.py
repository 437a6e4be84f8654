"""Example applications built on snapstate."""
