"""Shared fakes standing in for Playwright and the context pool."""

import pytest

import utils.browser_pool as browser_pool_module
from utils.browser_pool import ContextPool


class FakePage:
    """In-memory page: serves fixed HTML/text and records navigation."""

    def __init__(self, html: str = "<html><body></body></html>", text: str = "",
                 final_url: str = None, goto_error: Exception = None):
        self.html = html
        self.text = text
        self.final_url = final_url
        self.goto_error = goto_error
        self._url = "about:blank"
        self.goto_calls = []
        self.waits = []
        self.default_timeout = None
        self.content_error = None
        self.inner_text_error = None

    @property
    def url(self) -> str:
        return self._url

    def set_default_timeout(self, timeout):
        self.default_timeout = timeout

    async def goto(self, url, wait_until=None, timeout=None):
        self.goto_calls.append({"url": url, "wait_until": wait_until, "timeout": timeout})
        if self.goto_error:
            raise self.goto_error
        self._url = self.final_url or url

    async def wait_for_timeout(self, timeout):
        self.waits.append(timeout)

    async def content(self) -> str:
        if self.content_error:
            raise self.content_error
        return self.html

    async def inner_text(self, selector: str) -> str:
        if self.inner_text_error:
            raise self.inner_text_error
        return self.text


class FakeContext:
    def __init__(self, page: FakePage = None, close_error: Exception = None):
        self.page = page or FakePage()
        self.close_error = close_error
        self.closed = False
        self.options = {}

    async def new_page(self):
        return self.page

    async def close(self):
        self.closed = True
        if self.close_error:
            raise self.close_error


class FakeBrowser:
    def __init__(self):
        self.connected = True
        self.contexts = []
        self.closed = False

    def is_connected(self):
        return self.connected

    async def new_context(self, **options):
        context = FakeContext()
        context.options = options
        self.contexts.append(context)
        return context

    async def close(self):
        self.closed = True
        self.connected = False


class FakeChromium:
    def __init__(self):
        self.launches = []
        self.browsers = []

    async def launch(self, **options):
        self.launches.append(options)
        browser = FakeBrowser()
        self.browsers.append(browser)
        return browser


class FakePlaywright:
    def __init__(self):
        self.chromium = FakeChromium()
        self.stopped = False

    async def start(self):
        return self

    async def stop(self):
        self.stopped = True


class FakePool:
    """Context pool stand-in handing out one prepared page."""

    def __init__(self, page: FakePage = None, create_error: Exception = None):
        self.page = page or FakePage()
        self.create_error = create_error
        self.created = []
        self.closed = []

    async def create_context(self):
        if self.create_error:
            raise self.create_error
        context = FakeContext(self.page)
        self.created.append(context)
        return context, self.page

    async def close_context(self, context):
        self.closed.append(context)

    async def close_all(self):
        pass


@pytest.fixture
def fake_playwright(monkeypatch):
    playwright = FakePlaywright()
    monkeypatch.setattr(browser_pool_module, "async_playwright", lambda: playwright)
    return playwright


@pytest.fixture
def pool(fake_playwright):
    return ContextPool(max_contexts=2, headless=True, slow_mo=0,
                       default_timeout=5000, acquire_timeout=0.05)
