"""Generative sketches of recursively subdivided triangles."""
