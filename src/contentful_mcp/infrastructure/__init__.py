"""Infrastructure layer: remote content store access."""
