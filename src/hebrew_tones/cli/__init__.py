"""Command-line interface for Hebrew Tones."""
