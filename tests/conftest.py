"""
Fake Playwright used in place of a real Chromium
"""
import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

import phone_scraper


class FakePage:
    def __init__(self, site):
        self.site = site
        self.url = None

    def goto(self, url, wait_until=None, timeout=None):
        self.site.calls.append(("goto", url, wait_until))
        if self.site.unreachable:
            raise PlaywrightTimeoutError(f"Timeout exceeded navigating to {url}")
        self.url = url

    def wait_for_selector(self, selector, state=None, timeout=None):
        self.site.calls.append(("wait_for_selector", selector, state))
        if selector not in self.site.elements:
            raise PlaywrightTimeoutError(f"waiting for locator('{selector}')")

    def click(self, selector, timeout=None):
        self.site.calls.append(("click", selector))
        self.site.revealed = True

    def inner_text(self, selector, timeout=None):
        if not self.site.revealed:
            return ""
        return self.site.elements[selector]


class FakeBrowser:
    def __init__(self, site):
        self.site = site
        self.closed = False

    def new_page(self):
        return FakePage(self.site)

    def close(self):
        self.closed = True


class FakeChromium:
    def __init__(self, site):
        self.site = site

    def launch(self, headless=True):
        if self.site.launch_fails:
            raise phone_scraper.PlaywrightError("Executable doesn't exist")
        browser = FakeBrowser(self.site)
        self.site.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self, site):
        self.chromium = FakeChromium(site)

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        return False


class FakeSite:
    """A target page: maps selectors to the text they render"""

    def __init__(self):
        self.elements = {
            'i[rest="user-phone"]': "",
            "div.--flex-1.--pl-4.--pr-4": "  +380 67 123 45 67 \n",
        }
        self.unreachable = False
        self.launch_fails = False
        self.revealed = False
        self.browsers = []
        self.calls = []


@pytest.fixture
def site(monkeypatch):
    fake = FakeSite()
    monkeypatch.setattr(phone_scraper, "sync_playwright", lambda: FakePlaywright(fake))
    return fake
