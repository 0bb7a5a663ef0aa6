"""Infrastructure layer: repository discovery, filesystem I/O, workspace."""
