"""Small helpers shared across cropkit."""
