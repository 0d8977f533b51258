"""Infrastructure Layer - logging and other process-level plumbing."""
