"""Tests for pagination helpers."""

import pytest

from minilinkedin.models.post import Post
from minilinkedin.models.user import User
from minilinkedin.services.pagination import Page, PageParams, build_page_params, paginate


@pytest.fixture
def author(db):
    user = User(email="pager@example.com", name="Pager", password_hash="fake")
    db.add(user)
    db.commit()
    return user


def test_skip_is_zero_based():
    assert PageParams(page=1, limit=10).skip == 0
    assert PageParams(page=3, limit=10).skip == 20


def test_build_page_params_defaults_and_clamps():
    assert build_page_params(1, None, default_limit=10, max_limit=100) == PageParams(1, 10)
    assert build_page_params(2, 500, default_limit=10, max_limit=100) == PageParams(2, 100)


def test_page_metadata_last_page():
    page = Page(items=[1, 2, 3, 4, 5], total=25, params=PageParams(page=3, limit=10))
    assert page.metadata("total_posts") == {
        "current_page": 3,
        "total_pages": 3,
        "total_posts": 25,
        "has_next_page": False,
        "has_prev_page": True,
    }


def test_page_metadata_empty():
    page = Page(items=[], total=0, params=PageParams())
    assert page.total_pages == 0
    assert page.has_next_page is False
    assert page.has_prev_page is False


@pytest.mark.parametrize("total,limit", [(0, 10), (1, 10), (10, 10), (11, 10), (25, 7)])
def test_pages_add_up_to_total(db, author, total, limit):
    """Every row appears once across pages 1..total_pages; only the last lacks a next page."""
    db.add_all([Post(content=f"post {i}", author_id=author.id) for i in range(total)])
    db.commit()

    query = db.query(Post).order_by(Post.created_at.desc(), Post.id.desc())
    first = paginate(query, PageParams(page=1, limit=limit))

    seen = []
    for number in range(1, first.total_pages + 1):
        page = paginate(query, PageParams(page=number, limit=limit))
        assert page.total == total
        assert page.has_next_page is (number < first.total_pages)
        seen.extend(post.id for post in page.items)

    assert len(seen) == total
    assert len(set(seen)) == total
