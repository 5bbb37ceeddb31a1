"""Study time calendar: daily study log backed by a hosted table with a local fallback."""

__version__ = '0.1.0'
