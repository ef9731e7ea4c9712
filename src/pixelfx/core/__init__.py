"""Core filtering logic for pixelfx."""
