"""
Pydantic schema definitions for API payloads.

Python attributes use snake_case; the JSON wire format uses the
camelCase names existing clients expect (``toolId``, ``addedAt``...),
declared as field aliases.  FastAPI serializes response models by
alias.
"""
