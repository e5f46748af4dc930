"""External service integrations for Dev Diary."""
