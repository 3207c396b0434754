"""Core configuration, logging, errors and instance lifecycle rules."""
