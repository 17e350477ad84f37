"""KSUID errors with context for tracking."""

from utils.timestamp import format_timestamp


class KsuidError(Exception):
    """Base error with context and creation timestamp."""

    def __init__(self, message, context=None, cause=None):
        super().__init__(message)
        self.timestamp = format_timestamp()
        self.context = context or {}
        self.cause = cause


class DecodeError(KsuidError, ValueError):
    """Text or bytes that do not decode to a KSUID."""

    def __init__(self, message, text=None, position=None, **kwargs):
        context = kwargs.pop("context", {})
        if text is not None:
            context["text"] = text
        if position is not None:
            context["position"] = position
        super().__init__(message, context=context, **kwargs)


class FieldRangeError(KsuidError, ValueError):
    """Explicit timestamp or payload outside its unsigned range."""

    def __init__(self, message, field=None, value=None, **kwargs):
        context = kwargs.pop("context", {})
        if field:
            context["field"] = field
        if value is not None:
            context["value"] = value
        super().__init__(message, context=context, **kwargs)


class ClockError(KsuidError):
    """System clock outside the window a 32-bit timestamp can represent."""

    def __init__(self, message, unix_seconds=None, **kwargs):
        context = kwargs.pop("context", {})
        if unix_seconds is not None:
            context["unix_seconds"] = unix_seconds
        super().__init__(message, context=context, **kwargs)
