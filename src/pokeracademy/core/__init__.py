"""Domain model, grading and presentation-independent trainer logic."""
