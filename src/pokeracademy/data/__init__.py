"""Static assets shipped with the package."""
