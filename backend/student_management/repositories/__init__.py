"""
Repositories Layer

Data access for each entity, kept free of business rules:
- Wrap a SQLModel Session
- Return models or None, never raise for a missing row
- Commit on every write
"""
