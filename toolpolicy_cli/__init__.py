"""Command line surface for auditing the tool policy."""
