"""
Services Layer

Business logic over repositories:
- Constructed with the repositories they use
- Accept and return models, never HTTP request/response objects
- Raise domain errors; routes translate them to status codes
"""
