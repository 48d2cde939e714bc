"""stylepipe CLI commands."""
