"""Resume-Diff: before/after comparison of original and tailored resumes."""

__version__ = "0.1.0"
