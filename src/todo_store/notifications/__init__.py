"""
UI flags: theme mode and the two one-shot banners.

Components:
- flag_store.py: UiFlags + pure flag transitions
"""
