class ContactFormError(Exception):
    """Base error for anything that ends a contact submission early"""
    status_code: int = 400
    default_message: str = "Bad request"

    def __init__(self, message: str | None = None, details: list[dict[str, str]] | None = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


class OriginNotAllowed(ContactFormError):
    status_code = 403
    default_message = "Origin not allowed"


class MethodNotAllowed(ContactFormError):
    status_code = 405
    default_message = "Method not allowed. Use POST."


class UnsupportedMediaType(ContactFormError):
    status_code = 400
    default_message = "Content-Type must be application/json"


class InvalidPayload(ContactFormError):
    status_code = 400
    default_message = "Invalid JSON payload"


class ValidationFailed(ContactFormError):
    status_code = 400
    default_message = "Validation failed"

    def __init__(self, details: list[dict[str, str]]):
        super().__init__(details=details)


class SuspiciousEmail(ContactFormError):
    status_code = 400
    default_message = "Please provide a valid email address"


class EmailNotConfigured(ContactFormError):
    status_code = 500
    default_message = "Email service not configured"


class EmailDispatchError(ContactFormError):
    """
        raised when SendGrid refuses or never receives the message,
        provider_status and provider_body are for the logs only
    """
    status_code = 500
    default_message = "Internal server error. Please try again later."

    def __init__(self, reason: str, provider_status: int | None = None, provider_body: str | bytes | None = None):
        super().__init__()
        self.reason = reason
        self.provider_status = provider_status
        self.provider_body = provider_body
