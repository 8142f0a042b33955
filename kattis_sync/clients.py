import logging

import requests

from .base import TransportError
from .models import SyncConfig

logger = logging.getLogger(__name__)

COOKIE_NAME = "EduSiteCookie"
PROBLEMS_PATH = "/problems"
SOLVED_FILTER = {
    "show_solved": "on",
    "show_tried": "off",
    "show_untried": "off",
}


class KattisClient:
    def __init__(self, config: SyncConfig, headers: dict[str, str] | None = None):
        self.config = config
        self.session = requests.Session()

        default_headers = {
            "User-Agent": "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
        }
        if headers:
            default_headers.update(headers)

        self.session.headers.update(default_headers)
        self.session.cookies.set(
            COOKIE_NAME, config.token, domain=config.cookie_domain
        )

    def __enter__(self) -> "KattisClient":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def page_url(self) -> str:
        return self.config.base_url + PROBLEMS_PATH

    def fetch_page(self, page: int) -> str:
        logger.info("Getting online problems page %d...", page)
        params = {"page": str(page), **SOLVED_FILTER}
        try:
            response = self.session.get(
                self.page_url(), params=params, timeout=self.config.timeout_seconds
            )
            response.raise_for_status()
        except requests.RequestException as e:
            raise TransportError(f"page {page}: {e}") from e
        return response.text

    def close(self) -> None:
        self.session.close()
