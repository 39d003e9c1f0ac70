"""Core configuration, paths, and theming for scratchkeep."""
