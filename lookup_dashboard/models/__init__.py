"""Request/response schemas for the dashboard API."""
