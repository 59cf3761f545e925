"""Feature slices built on top of the core trainer."""
