from urllib.parse import urlsplit

from django.conf import settings


def get_image_url(image_path):
    """
    Turn a stored image reference into something a client can load.

    Absolute ``http(s)://`` URLs pass through; bare file names are served from
    ``/images/``.
    """
    if not image_path:
        return None

    if image_path.startswith(("http://", "https://")):
        return image_path

    if image_path.startswith("/"):
        return image_path

    return f"/images/{image_path}"


def normalize_image_url(image_url):
    """
    Normalize an image reference before it is persisted.

    - site-relative ``/images/...`` and ``/uploads/...`` paths are kept
    - absolute URLs pointing at this site (``SITE_DOMAIN``) are reduced to their path
    - any other external URL is kept as is
    - bare file names become ``/images/<name>``
    """
    if not image_url:
        return None

    image_url = image_url.strip()

    if image_url.startswith(("/images/", "/uploads/")):
        return image_url

    site_domain = getattr(settings, "SITE_DOMAIN", "").lower()
    if image_url.startswith(("http://", "https://")):
        parts = urlsplit(image_url)
        if site_domain and parts.hostname == site_domain:
            path = parts.path or "/"
            return f"{path}?{parts.query}" if parts.query else path
        return image_url

    return get_image_url(image_url)
