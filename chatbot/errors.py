class ChatError(RuntimeError):
    """Base class for failures scoped to a single chat request.

    Each subclass pairs a fixed, user-safe ``user_message`` with the
    diagnostic ``detail`` supplied at raise time.
    """

    kind = "internal_error"
    status_code = 500
    user_message = "Sorry, something went wrong. Please try again in a moment."

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail


class ConfigurationError(ChatError):
    """The completion credential is not configured."""

    kind = "configuration_error"
    user_message = (
        "The assistant is not available right now because it has not been "
        "configured. Please try again later."
    )


class UpstreamError(ChatError):
    """The completion provider failed to produce a reply."""

    kind = "upstream_error"
    user_message = (
        "Sorry, I'm having trouble answering right now. Please try again shortly."
    )


class InvalidMessageError(ChatError):
    """The new user message is missing or blank."""

    kind = "validation_error"
    status_code = 400
    user_message = "Please type a message before sending."
