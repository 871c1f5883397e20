"""Study tracker - weekly study-hour goals with logged sessions."""

__version__ = "1.0.0"
