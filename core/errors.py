"""Playground errors with tracking IDs."""

from utils.timestamp import format_timestamp
from utils.ksuid import generate_ksuid


class BaseSimError(Exception):
    """Base error carrying a KSUID and the time it was raised."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.error_id = generate_ksuid()
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause

    def __str__(self):
        return f"[{self.error_id}] {super().__str__()}"

    def to_dict(self):
        return {"error_id": self.error_id, "timestamp": self.timestamp,
                "msg": self.args[0] if self.args else "", "context": self.context}


class PaletteError(BaseSimError):
    """A color outside the fixed palette was named or toggled."""

    def __init__(self, message, color=None, **kwargs):
        context = kwargs.pop("context", {})
        if color is not None:
            context["color"] = str(color)
        super().__init__(message, context=context, **kwargs)
