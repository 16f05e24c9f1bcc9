"""Command-line interface for Pay Allowance."""
