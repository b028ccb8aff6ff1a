"""Concrete collaborators for the filesystem, terminal, and Storybook project files."""
