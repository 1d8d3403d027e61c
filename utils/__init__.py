"""Library App - Utilities Package

- Input validators (validators.py)
- CLI output helpers (ui_helpers.py)
"""
