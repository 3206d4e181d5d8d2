"""Commands for pace CLI."""
