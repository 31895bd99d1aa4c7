"""Static data and constants."""
