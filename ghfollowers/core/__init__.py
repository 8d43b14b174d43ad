"""Core services: API client, favorites, follower list."""
