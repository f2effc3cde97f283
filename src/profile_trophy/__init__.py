"""profile-trophy: achievement trophies from aggregate profile statistics."""

__version__ = "0.1.0"
