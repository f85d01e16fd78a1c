"""Result caching."""
