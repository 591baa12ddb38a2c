import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, List, Optional

from playwright.async_api import Page, async_playwright

from timeoff.fields import StatusStyle

logger = logging.getLogger(__name__)

FORM_SELECTOR = "#timeOffForm"
STATUS_SELECTOR = "#status"
SUBMIT_SELECTOR = "#submitBtn"

_SET_STATUS_JS = """(el, [text, style]) => {
    el.textContent = text;
    el.classList.remove('success', 'error');
    if (style) el.classList.add(style);
}"""


class PlaywrightFormView:
    """FormView over a live page: fields by ``name`` inside the form element."""

    def __init__(
        self,
        page: Page,
        form_selector: str = FORM_SELECTOR,
        status_selector: str = STATUS_SELECTOR,
        submit_selector: str = SUBMIT_SELECTOR,
    ):
        self.page = page
        self.form_selector = form_selector
        self.status_selector = status_selector
        self.submit_selector = submit_selector

    def _field(self, field: str):
        return self.page.locator(f'{self.form_selector} [name="{field}"]').first

    async def field_names(self) -> List[str]:
        names = await self.page.locator(f"{self.form_selector} [name]").evaluate_all(
            "els => els.map(el => el.getAttribute('name'))"
        )
        # Keep document order, drop radio/checkbox duplicates
        return list(dict.fromkeys(n for n in names if n))

    async def get_value(self, field: str) -> Optional[str]:
        locator = self._field(field)
        if await locator.count() == 0:
            return None
        return await locator.input_value()

    async def set_value(self, field: str, value: str) -> None:
        locator = self._field(field)
        if await locator.count() == 0:
            logger.debug(f"No field named {field!r} on page, not setting it")
            return
        await locator.evaluate("(el, v) => { el.value = v; }", value)

    async def reset(self) -> None:
        # Native reset restores select, radio and checkbox defaults
        await self.page.locator(self.form_selector).evaluate("form => form.reset()")

    async def focus(self, field: str) -> None:
        locator = self._field(field)
        if await locator.count():
            await locator.focus()

    async def set_status(self, text: str, style: StatusStyle = StatusStyle.NONE) -> None:
        await self.page.locator(self.status_selector).evaluate(_SET_STATUS_JS, [text or "", style.value])

    async def set_submit_enabled(self, enabled: bool) -> None:
        await self.page.locator(self.submit_selector).evaluate(
            "(el, enabled) => { el.disabled = !enabled; }", enabled
        )


@asynccontextmanager
async def open_form_page(url: str, timeout_ms: int = 15000) -> AsyncIterator[Page]:
    """Open ``url`` in headless Chromium and yield the loaded page."""
    async with async_playwright() as p:
        browser = await p.chromium.launch(headless=True)
        try:
            page = await browser.new_page()
            await page.goto(url, wait_until="networkidle", timeout=timeout_ms)
            logger.info(f"Opened form page {url}")
            yield page
        finally:
            await browser.close()
