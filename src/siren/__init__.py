"""SIREN: structured incident records from free-text emergency reports."""

__version__ = "0.1.0"
