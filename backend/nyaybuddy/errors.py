class NyayBuddyError(Exception):
    """Base class for errors raised by the intake service."""


class GatewayError(NyayBuddyError):
    """The inference gateway could not be reached or answered with a failure."""

    status_code = 502
    default_message = "AI gateway error. Please try again."

    def __init__(self, message: str | None = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class RateLimitedError(GatewayError):
    status_code = 429
    default_message = "Rate limit exceeded. Please try again in a moment."


class CreditsExhaustedError(GatewayError):
    status_code = 402
    default_message = "AI credits exhausted. Please add credits to continue."


class IntakeValidationError(NyayBuddyError):
    """User input was rejected before any gateway call was made."""


class InvalidTransition(NyayBuddyError):
    """The requested event is not allowed from the session's current step."""


class SessionNotFound(NyayBuddyError):
    pass
