"""
Pytest test suite for the CJSC V2 metadata server.

Test categories:
- Unit tests: formatting, validators, chain reader fallbacks, allowlist lookup
- API tests: full FastAPI app over httpx ASGITransport with mocked contracts
"""
