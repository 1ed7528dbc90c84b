from .published_landing_page import PublishedLandingPageModel

__all__ = [
    "PublishedLandingPageModel",
]
