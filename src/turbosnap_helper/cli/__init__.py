"""Command-line modes for turbosnap-helper."""
