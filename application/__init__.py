"""
Application Layer for Alethea Tracker.

Part of ALT-4: Inject persistence into the completion store

This package contains:
- ports/: Abstract interfaces (what the core needs)
- services/: The completion store shared by use cases
- use_cases/: Entry points for recording completions and reading progress
- errors.py: NetworkError, StorageError, ParseError
"""
