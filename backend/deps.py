"""
Shared FastAPI dependencies.

The chain client and allowlist table are built once in main.lifespan and
kept on app.state; routers reach them through these dependencies so tests
can swap them with app.dependency_overrides.
"""

from __future__ import annotations

from fastapi import Request

from chain_client import ChainClient
from config import Settings, settings
from services.allowlist_service import AllowlistTable


def get_settings() -> Settings:
    return settings


def get_chain_client(request: Request) -> ChainClient:
    return request.app.state.chain_client


def get_allowlist(request: Request) -> AllowlistTable:
    return request.app.state.allowlist
