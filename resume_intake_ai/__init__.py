"""Resume Intake AI: structured profile extraction from uploaded resumes."""

__version__ = "0.1.0"
