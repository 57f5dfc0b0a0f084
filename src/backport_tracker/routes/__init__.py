"""HTTP routes for the board service."""
