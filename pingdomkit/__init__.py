"""Request and response models for the Pingdom monitoring API."""

__version__ = "0.1.0"

__all__ = [
    "checks",
    "contacts",
    "errors",
    "maintenance",
    "occurrences",
    "responses",
    "teams",
]