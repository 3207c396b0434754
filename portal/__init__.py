"""Launchpad Portal: customer and administration portal for hosted instances."""
