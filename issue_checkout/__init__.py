"""Check out the local git branch that belongs to a numbered issue."""

__version__ = "0.1.0"
