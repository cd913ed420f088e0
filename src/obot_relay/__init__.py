"""Slack Events API relay to the Obot task API."""
