"""Read-only monitoring API over phone-lookup job records."""
