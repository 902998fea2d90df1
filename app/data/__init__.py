"""
Data access layer.

Design rules:
- Views read data ONLY through the fetch_* functions in data.service.
- Every service function takes an explicitly constructed client (live or mock).
- Failures are logged here and re-raised as one coarse error per operation.
- No env var reads here (config-only).
"""
