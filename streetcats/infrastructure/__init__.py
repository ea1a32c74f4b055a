"""Infrastructure adapters: MongoDB repositories and local image storage."""
