"""careerfit: RIASEC-based career assessment and matching."""

__version__ = "0.1.0"
