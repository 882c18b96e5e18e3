"""Job and node data model, in-process locking, wildcard matching and middleware chains."""

__version__ = "0.1.0"