"""Time off request submission workflow.

One controller per form view. ``handle_submit`` validates the current field
values, posts them to the configured backend and renders the outcome into
the view's status region. Only the disabled submit control keeps a second
submission from starting while one is in flight; there is no lock and no
cancellation.
"""

import logging
import random
from enum import Enum
from typing import Dict, Optional, Sequence

import httpx

from timeoff.config import FormSettings
from timeoff.fields import ALL_FIELDS, SECRET_FIELD, ErrorKind, StatusStyle, SubmissionOutcome
from timeoff.quotes import QUOTES, load_quotes, random_quote
from timeoff.secret import generate_secret
from timeoff.submit import post_form
from timeoff.validate import validate_fields
from timeoff.view import FormView

logger = logging.getLogger(__name__)

SUBMITTING_MESSAGE = "Submitting…"
NOT_CONFIGURED_MESSAGE = (
    "Form backend not configured. Set TIMEOFF_ENDPOINT_URL to your Apps Script web app URL."
)
SUCCESS_HEADLINE = "Time off request submitted! ✈️"
SUCCESS_FOOTER = "You will receive a confirmation shortly."


class State(str, Enum):
    IDLE = "idle"
    VALIDATING = "validating"
    REJECTED = "rejected"
    SUBMITTING = "submitting"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


def success_message(quote: Optional[str] = None) -> str:
    if quote:
        return f'{SUCCESS_HEADLINE}\n\n"{quote}"\n\n{SUCCESS_FOOTER}'
    return f"{SUCCESS_HEADLINE}\n\n{SUCCESS_FOOTER}"


class SubmissionController:
    def __init__(
        self,
        view: FormView,
        settings: FormSettings,
        transport: httpx.AsyncBaseTransport = None,
        rng: random.Random = None,
        quotes: Sequence[str] = None,
    ):
        self.view = view
        self.settings = settings
        self.transport = transport
        self.rng = rng or random.Random()
        if quotes is None:
            quotes = load_quotes(settings.quotes_file) if settings.include_quote else QUOTES
        self.quotes = quotes
        self.secret: Optional[str] = None
        self.state = State.IDLE
        self.last_state: Optional[State] = None

    async def initialize(self) -> None:
        await self._regenerate_secret()
        await self.view.set_submit_enabled(True)
        await self.view.set_status("", StatusStyle.NONE)
        self.state = State.IDLE

    async def _regenerate_secret(self) -> None:
        self.secret = generate_secret(self.rng)
        await self.view.set_value(SECRET_FIELD, self.secret)

    async def _read_fields(self) -> Dict[str, Optional[str]]:
        names = list(dict.fromkeys(list(ALL_FIELDS) + list(await self.view.field_names())))
        return {name: await self.view.get_value(name) for name in names}

    async def _fail(self, outcome: SubmissionOutcome, text: str) -> SubmissionOutcome:
        await self.view.set_status(text, StatusStyle.ERROR)
        return outcome

    async def handle_submit(self) -> SubmissionOutcome:
        """Run one submission attempt and return how it ended."""
        try:
            return await self._run()
        finally:
            await self.view.set_submit_enabled(True)
            self.last_state = self.state
            self.state = State.IDLE

    async def _run(self) -> SubmissionOutcome:
        await self.view.set_status("", StatusStyle.NONE)
        self.state = State.VALIDATING

        fields = await self._read_fields()
        result = validate_fields(fields)
        if not result.valid:
            self.state = State.REJECTED
            if result.field and fields.get(result.field) is not None:
                await self.view.focus(result.field)
            return await self._fail(SubmissionOutcome.rejected(result), result.message)

        if not self.settings.configured:
            self.state = State.REJECTED
            logger.error("❌ Form backend not configured, refusing to submit")
            outcome = SubmissionOutcome.failed(ErrorKind.NOT_CONFIGURED, NOT_CONFIGURED_MESSAGE)
            return await self._fail(outcome, NOT_CONFIGURED_MESSAGE)

        self.state = State.SUBMITTING
        await self.view.set_submit_enabled(False)
        await self.view.set_status(SUBMITTING_MESSAGE, StatusStyle.NONE)
        logger.info(f"Submitting time off request to {self.settings.endpoint_url}")

        # Values that are absent from the view are not sent
        payload = {name: value for name, value in fields.items() if value is not None}
        outcome = await post_form(
            self.settings.endpoint_url,
            payload,
            timeout=self.settings.timeout,
            transport=self.transport,
        )

        if not outcome.success:
            self.state = State.FAILED
            return await self._fail(outcome, f"Submission failed: {outcome.message}")

        await self.view.reset()
        await self._regenerate_secret()
        quote = random_quote(self.quotes, self.rng) if self.settings.include_quote else None
        text = success_message(quote)
        await self.view.set_status(text, StatusStyle.SUCCESS)
        self.state = State.SUCCEEDED
        logger.info("✅ Time off request submitted")
        return SubmissionOutcome.succeeded(text)
