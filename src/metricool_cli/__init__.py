"""Command-line client for the Metricool social media scheduler API."""

__version__ = "0.1.0"
