"""HTTP API for Dev Diary."""
