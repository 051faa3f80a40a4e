"""Generate TypeScript definitions from a PocketBase collection schema."""

__version__ = "0.1.0"
