"""FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from franchises.domain.repository.franchise_repository import FranchiseRepository


def get_franchise_repository(request: Request) -> FranchiseRepository:
    """The repository wired into the application by ``create_app``."""
    return request.app.state.franchise_repository
