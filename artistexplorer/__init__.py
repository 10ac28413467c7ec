"""Search the Spotify catalog for artists."""

__version__ = "0.1.0"
