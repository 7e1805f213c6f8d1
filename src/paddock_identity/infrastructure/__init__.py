"""Identity infrastructure adapters (persistence, email)."""
