"""Translation of domain errors into ``{"error": ...}`` HTTP responses."""
