"""
API schemas (pydantic).

Request and response contracts for every router, plus the normalized
catalog shapes produced by the catalog adapters.
"""
