"""Pothole Watch: citizen pothole reporting API."""

__version__ = "0.1.0"
