"""Project-wide default settings (see config/settings.py)."""
