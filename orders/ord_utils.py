import json
import logging
from typing import List, Tuple, Optional

from rest_framework.request import Request

logger = logging.getLogger("rest_framework")


def get_pagination_params(request: Request) -> Tuple[int, int]:
    """Extract 'page' and 'page_size' from query params with defaults."""
    try:
        page = max(int(request.query_params.get('page', 1)), 1)
    except (TypeError, ValueError):
        page = 1
    try:
        size = min(max(int(request.query_params.get('page_size', 10)), 1), 100)
    except (TypeError, ValueError):
        size = 10
    return page, size


def build_page_urls(request: Request, page: int, size: int, total: int) -> Tuple[Optional[str], Optional[str]]:
    """Construct 'next' and 'previous' page URLs."""
    def make_url(p: int) -> Optional[str]:
        if p < 1 or size <= 0:
            return None
        max_page = (total - 1) // size + 1
        if p > max_page:
            return None
        query = request.query_params.copy()
        query['page'] = p
        query['page_size'] = size
        return request.build_absolute_uri(f"?{query.urlencode()}")

    return make_url(page + 1), make_url(page - 1)


def parse_admin_emails(raw: str) -> List[str]:
    """
    Parse the JSON list of extra recipients sent with a receipt. Anything that
    is not a JSON list of strings is ignored.
    """
    if not raw:
        return []
    try:
        emails = json.loads(raw)
    except json.JSONDecodeError:
        logger.warning("Failed to parse adminEmails, ignoring")
        return []
    if not isinstance(emails, list):
        return []
    return [email for email in emails if isinstance(email, str) and email]
