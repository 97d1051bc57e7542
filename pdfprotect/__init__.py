"""Batch password protection for PDFs keyed on the date of birth found on page 1."""

__version__ = "0.1.0"
