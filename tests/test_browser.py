import asyncio
import re
import sys
from pathlib import Path

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from timeoff.browser import PlaywrightFormView
from timeoff.fields import StatusStyle


class _DummyLocator:
    def __init__(self, page, selector: str):
        self.page = page
        self.selector = selector
        m = re.search(r'\[name="([^"]+)"\]', selector)
        self.field = m.group(1) if m else None

    @property
    def first(self):
        return self

    async def count(self) -> int:
        return 1 if self.field in self.page.fields else 0

    async def input_value(self) -> str:
        return self.page.fields[self.field]

    async def focus(self):
        self.page.focused = self.field

    async def evaluate(self, _js: str, arg=None):
        if self.field:
            self.page.fields[self.field] = arg
        elif self.selector == "#status":
            self.page.status = tuple(arg)
        elif self.selector == "#submitBtn":
            self.page.submit_enabled = arg
        elif self.selector == "#timeOffForm":
            self.page.resets += 1
            self.page.fields = {name: "" for name in self.page.fields}

    async def evaluate_all(self, _js: str):
        return list(self.page.fields) + ["startDate"]


class _DummyPage:
    def __init__(self, fields):
        self.fields = dict(fields)
        self.focused = None
        self.status = None
        self.submit_enabled = None
        self.resets = 0

    def locator(self, selector: str):
        return _DummyLocator(self, selector)


def test_reads_and_writes_named_fields():
    page = _DummyPage({"name": "A", "startDate": "2024-05-01"})
    view = PlaywrightFormView(page)

    async def go():
        await view.set_value("name", "B")
        await view.set_value("nosuchfield", "x")
        return await view.get_value("name"), await view.get_value("email")

    name, email = asyncio.run(go())
    assert name == "B"
    assert email is None
    assert "nosuchfield" not in page.fields


def test_field_names_are_unique_in_document_order():
    page = _DummyPage({"name": "", "startDate": "", "reason": ""})
    names = asyncio.run(PlaywrightFormView(page).field_names())
    assert names == ["name", "startDate", "reason"]


def test_status_and_submit_control():
    page = _DummyPage({"email": ""})
    view = PlaywrightFormView(page)

    async def go():
        await view.focus("email")
        await view.focus("missing")
        await view.set_status("Submission blocked.", StatusStyle.ERROR)
        await view.set_submit_enabled(False)

    asyncio.run(go())
    assert page.focused == "email"
    assert page.status == ("Submission blocked.", "error")
    assert page.submit_enabled is False


def test_reset_uses_native_form_reset():
    page = _DummyPage({"name": "A", "absenceType": "PTO"})
    asyncio.run(PlaywrightFormView(page).reset())
    assert page.resets == 1
    assert page.fields == {"name": "", "absenceType": ""}
