"""HTTP API for Pothole Watch."""
