"""Infrastructure Layer — logging setup and other process-wide concerns."""
