"""mediacheck: verify that every media resource referenced by a page is reachable."""

__version__ = "0.1.0"
