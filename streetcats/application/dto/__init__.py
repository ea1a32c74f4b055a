"""Request and response DTOs exchanged with the API layer."""
