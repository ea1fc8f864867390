"""Follow-up issue action - files a test issue when a validated card is closed."""

__version__ = "0.1.0"
