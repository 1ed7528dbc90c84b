"""Unit tests for the process-wide dependency providers."""

from app.infrastructure.dependencies import get_landing_page_generator, get_sse_manager


def test_landing_page_generator_is_shared_across_requests():
    get_landing_page_generator.cache_clear()
    try:
        first = get_landing_page_generator()
        assert get_landing_page_generator() is first
    finally:
        get_landing_page_generator.cache_clear()


def test_sse_manager_is_shared_across_requests():
    assert get_sse_manager() is get_sse_manager()
