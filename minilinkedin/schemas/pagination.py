"""Pagination metadata schemas."""

from minilinkedin.schemas.base import CamelModel


class PaginationResponse(CamelModel):
    """Page position shared by every paginated listing."""

    current_page: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool


class PostPagination(PaginationResponse):
    total_posts: int


class UserPagination(PaginationResponse):
    total_users: int
