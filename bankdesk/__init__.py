"""Console banking desk for clients, employees and admins kept in text files."""

__version__ = "0.1.0"