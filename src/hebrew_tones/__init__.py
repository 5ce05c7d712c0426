"""Hebrew Tones - map Hebrew letters to tones, analyze and play them."""

__version__ = "0.1.0"
