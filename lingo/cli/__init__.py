"""Command-line interface for translation file maintenance."""
