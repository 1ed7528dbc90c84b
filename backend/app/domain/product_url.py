"""Product URL allowlist: which store pages the generator accepts."""

from urllib.parse import urlparse

SUPPORTED_DOMAINS: tuple[str, ...] = (
    "amazon.com",
    "amazon.in",
    "flipkart.com",
    "myntra.com",
    "ajio.com",
    "nykaa.com",
    "shopify.com",
    "woocommerce.com",
)


def validate_product_url(url: str) -> bool:
    """Return True if ``url`` is an http(s) URL on a supported store domain.

    The host must equal a supported domain or be one of its subdomains
    (``www.amazon.in`` matches ``amazon.in``).
    """
    try:
        parsed = urlparse(url)
    except (TypeError, ValueError):
        return False

    if parsed.scheme not in ("http", "https"):
        return False

    host = (parsed.hostname or "").lower()
    if not host:
        return False

    return any(host == domain or host.endswith(f".{domain}") for domain in SUPPORTED_DOMAINS)
