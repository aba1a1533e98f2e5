"""Constants for the API layer."""

MAX_CONTENT_CHARS = 5_000_000
DEFAULT_EXPORT_MODEL = "unknown"
