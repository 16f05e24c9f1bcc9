"""Pay Allowance - daily spending allowance across a pay period."""

__version__ = "0.1.0"
