"""Ownership checks for mutating operations."""

from fastapi import HTTPException, status


def ensure_owner(requester_id: str, owner_id: str, detail: str) -> None:
    """Allow the mutation only when the caller owns the resource."""
    if requester_id != owner_id:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=detail)
