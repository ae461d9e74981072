"""Token-authenticated posts API."""
