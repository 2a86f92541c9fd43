"""
Phone number scraper driven by a headless Chromium (Playwright).

Flow for one lookup:
- open the page and wait for the network to go idle
- click the "reveal phone" control
- wait for the phone block to become visible and read its text

Every lookup launches its own browser and always closes it, whatever happens.
"""
import logging
from typing import Optional

from playwright.sync_api import Error as PlaywrightError
from playwright.sync_api import sync_playwright

from config import get_config

logger = logging.getLogger(__name__)


class ScrapeError(Exception):
    """Browser launch, navigation or selector wait failed."""


class PhoneNumberNotFound(Exception):
    """The page was scraped but the phone block had no text."""


class PhoneScraper:
    """Reveal and read a phone number from a listing page"""

    def __init__(
        self,
        button_selector: Optional[str] = None,
        phone_selector: Optional[str] = None,
        headless: Optional[bool] = None,
        navigation_timeout: Optional[float] = None,
        selector_timeout: Optional[float] = None,
    ):
        self.config = get_config()
        selectors = self.config["selectors"]
        browser_config = self.config["browser"]

        self.button_selector = button_selector or selectors["button"]
        self.phone_selector = phone_selector or selectors["phone"]
        self.headless = browser_config["headless"] if headless is None else headless
        # None lets Playwright apply its own default (30s)
        self.navigation_timeout = (
            navigation_timeout if navigation_timeout is not None else browser_config["navigation_timeout"]
        )
        self.selector_timeout = (
            selector_timeout if selector_timeout is not None else browser_config["selector_timeout"]
        )

    def get_phone_number(self, page_url: str) -> str:
        """
        Returns the revealed phone number, stripped of surrounding whitespace.

        Raises:
            ValueError: page_url is empty
            PhoneNumberNotFound: the phone block was visible but empty
            ScrapeError: any browser automation failure
        """
        if not page_url:
            raise ValueError("page_url is required")

        try:
            with sync_playwright() as p:
                browser = p.chromium.launch(headless=self.headless)
                try:
                    page = browser.new_page()
                    phone = self._reveal_phone(page, page_url)
                finally:
                    browser.close()
        except PlaywrightError as e:
            raise ScrapeError(f"Failed to scrape {page_url}: {e}") from e

        if not phone:
            logger.info("Phone block empty on %s", page_url)
            raise PhoneNumberNotFound(page_url)

        logger.info("Phone number extracted from %s", page_url)
        return phone

    # -------------------------
    # Page steps
    # -------------------------
    def _reveal_phone(self, page, page_url: str) -> str:
        logger.debug("Opening %s", page_url)
        page.goto(page_url, wait_until="networkidle", timeout=self.navigation_timeout)

        page.wait_for_selector(self.button_selector, timeout=self.selector_timeout)
        page.click(self.button_selector, timeout=self.selector_timeout)

        page.wait_for_selector(self.phone_selector, state="visible", timeout=self.selector_timeout)
        text = page.inner_text(self.phone_selector, timeout=self.selector_timeout)
        return (text or "").strip()
