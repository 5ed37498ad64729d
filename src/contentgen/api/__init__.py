"""Content Generator - backend API layer.

Modules
-------
client
    httpx-based client for the ``/content`` endpoints and the
    ``APIError`` hierarchy raised by it.
models
    Pydantic models for the backend's camelCase JSON payloads.
"""
