"""Command line host for the release step."""
