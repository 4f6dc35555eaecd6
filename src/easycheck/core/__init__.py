"""Core enumerations and error classes shared by all checks."""
