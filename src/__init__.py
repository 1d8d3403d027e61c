"""Library App - Core Application Package

This package contains the in-memory domain model:
- Data models (book.py, member.py)
- Library management logic (library.py)
- Collection statistics (library_statistics.py)
- Error types (errors.py)
"""
