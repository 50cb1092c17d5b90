"""Core configuration, errors, security and logging."""
