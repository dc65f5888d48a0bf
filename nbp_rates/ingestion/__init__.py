"""Request building, transport and payload extraction for NBP rates."""
