"""Statistics computed over NBP rate series."""
