"""Multiple-choice question generation from course documents."""

__version__ = "0.1.0"
