# app.py
import argparse
import asyncio
import json
import logging
import sys
from typing import Dict, List, Optional

from playwright.async_api import Error as PlaywrightError

from timeoff.browser import PlaywrightFormView, open_form_page
from timeoff.config import FormSettings, load_settings
from timeoff.controller import SubmissionController
from timeoff.fields import SubmissionOutcome
from timeoff.view import FormView, InMemoryFormView

logger = logging.getLogger(__name__)


def parse_field_args(pairs: List[str]) -> Dict[str, str]:
    fields = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep or not key:
            raise ValueError(f"Expected KEY=VALUE, got {pair!r}")
        fields[key.strip()] = value
    return fields


def load_field_file(path: Optional[str]) -> Dict[str, str]:
    if not path:
        return {}
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path} must contain a JSON object of field values")
    return {str(k): "" if v is None else str(v) for k, v in data.items()}


async def submit_with_view(view: FormView, settings: FormSettings, **controller_kwargs) -> SubmissionOutcome:
    controller = SubmissionController(view, settings, **controller_kwargs)
    await controller.initialize()
    return await controller.handle_submit()


async def submit_on_page(url: str, fields: Dict[str, str], settings: FormSettings) -> SubmissionOutcome:
    async with open_form_page(url) as page:
        view = PlaywrightFormView(page)
        for name, value in fields.items():
            await view.set_value(name, value)
        return await submit_with_view(view, settings)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="timeoff-submit", description="Submit a time off request.")
    parser.add_argument("--field", action="append", default=[], metavar="KEY=VALUE", help="form field value")
    parser.add_argument("--json", dest="json_file", help="JSON object file with field values")
    parser.add_argument("--endpoint", help="backend URL (overrides TIMEOFF_ENDPOINT_URL)")
    parser.add_argument("--no-quote", action="store_true", help="leave the quote out of the success message")
    parser.add_argument("--page", help="drive a live form page at this URL instead of an in-memory form")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: List[str] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    settings = load_settings()
    if args.endpoint:
        settings = settings.model_copy(update={"endpoint_url": args.endpoint})
    if args.no_quote:
        settings = settings.model_copy(update={"include_quote": False})

    try:
        fields = load_field_file(args.json_file)
        fields.update(parse_field_args(args.field))
    except (OSError, ValueError) as e:
        logger.error(f"Bad field input: {e}")
        return 2

    if args.page:
        try:
            outcome = asyncio.run(submit_on_page(args.page, fields, settings))
        except PlaywrightError as e:
            logger.error(f"Page error on {args.page}: {e}")
            print(f"Could not load form page: {e}")
            return 1
    else:
        outcome = asyncio.run(submit_with_view(InMemoryFormView(fields), settings))

    print(outcome.message or "")
    return 0 if outcome.success else 1


if __name__ == "__main__":
    sys.exit(main())
