"""Interactive workflows that configure Chromatic for a Storybook project."""
