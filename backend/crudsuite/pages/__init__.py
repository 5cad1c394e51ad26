"""Static HTML pages served at GET / (one per app key)."""
