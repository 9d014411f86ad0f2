"""Infrastructure layer - logging and event delivery."""
