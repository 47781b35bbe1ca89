"""Core infrastructure: exceptions and logger setup."""
