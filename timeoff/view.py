from typing import Dict, Iterable, List, Mapping, Optional, Protocol

from timeoff.fields import ALL_FIELDS, StatusStyle


class FormView(Protocol):
    """What the controller needs from a rendered form."""

    async def field_names(self) -> List[str]: ...

    async def get_value(self, field: str) -> Optional[str]:
        """Current value, or ``None`` when the form has no such field."""

    async def set_value(self, field: str, value: str) -> None: ...

    async def reset(self) -> None:
        """Restore every field to its empty or default value."""

    async def focus(self, field: str) -> None: ...

    async def set_status(self, text: str, style: StatusStyle = StatusStyle.NONE) -> None: ...

    async def set_submit_enabled(self, enabled: bool) -> None: ...


class InMemoryFormView:
    """Dict-backed form, used by the CLI and the tests.

    Records every status change and submit toggle so callers can inspect
    what a user would have seen.
    """

    def __init__(self, values: Mapping[str, str] = None, fields: Iterable[str] = ALL_FIELDS):
        self.values: Dict[str, str] = {name: "" for name in fields}
        self.values.update(values or {})
        self.status_text = ""
        self.status_style = StatusStyle.NONE
        self.status_history: List[tuple] = []
        self.submit_enabled = True
        self.submit_history: List[bool] = []
        self.focused: Optional[str] = None

    async def field_names(self) -> List[str]:
        return list(self.values)

    async def get_value(self, field: str) -> Optional[str]:
        return self.values.get(field)

    async def set_value(self, field: str, value: str) -> None:
        self.values[field] = value

    async def reset(self) -> None:
        for name in self.values:
            self.values[name] = ""

    async def focus(self, field: str) -> None:
        self.focused = field

    async def set_status(self, text: str, style: StatusStyle = StatusStyle.NONE) -> None:
        self.status_text = text or ""
        self.status_style = style
        self.status_history.append((self.status_text, style))

    async def set_submit_enabled(self, enabled: bool) -> None:
        self.submit_enabled = enabled
        self.submit_history.append(enabled)
