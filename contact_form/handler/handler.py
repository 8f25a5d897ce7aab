from json.decoder import JSONDecodeError

from fastapi import Request
from fastapi.responses import JSONResponse, Response

from contact_form.config import Settings
from contact_form.cors import CorsPolicy
from contact_form.email import Emailer
from contact_form.errors import OriginNotAllowed, MethodNotAllowed, UnsupportedMediaType, InvalidPayload, \
    SuspiciousEmail, EmailNotConfigured, EmailDispatchError
from contact_form.models import ContactResponse, parse_submission
from contact_form.spam import SpamFilter
from contact_form.utils.my_logger import init_logger
from contact_form.utils.utils import mask_email

handler_logger = init_logger("contact-handler")

SUCCESS_MESSAGE = "Thank you for your message. We will get back to you soon!"


def is_json_content_type(content_type: str | None) -> bool:
    """application/json, application/json; charset=utf-8 and application/*+json are all accepted"""
    if not content_type:
        return False
    media_type = content_type.split(';', 1)[0].strip().lower()
    return media_type == "application/json" or (media_type.startswith("application/") and
                                                media_type.endswith("+json"))


class ContactFormHandler:
    """
    **ContactFormHandler**
        single entry point for contact submissions, gates run once per request in a fixed order

            CORS origin -> method -> content type -> schema -> honeypot -> suspicious email -> dispatch

        failures are raised as ContactFormError subclasses and rendered by the application's exception handlers
    """

    def __init__(self, settings: Settings, emailer: Emailer | None = None, spam_filter: SpamFilter | None = None):
        self.settings = settings
        self.cors = CorsPolicy.from_settings(settings.CORS_SETTINGS)
        self.emailer = emailer
        self.spam_filter = spam_filter or SpamFilter()

    async def handle(self, request: Request) -> Response:
        origin = request.headers.get('origin')
        cors_allowed = self.cors.is_allowed(origin)

        if not cors_allowed:
            handler_logger.warning(f"CORS: Origin not allowed : {origin} method: {request.method}")
            raise OriginNotAllowed()

        cors_headers = self.cors.headers(origin)

        if request.method == "OPTIONS":
            return Response(status_code=204, headers=cors_headers)

        if request.method != "POST":
            raise MethodNotAllowed()

        if not is_json_content_type(request.headers.get('content-type')):
            raise UnsupportedMediaType()

        try:
            payload = await request.json()
        except (JSONDecodeError, UnicodeDecodeError) as e:
            handler_logger.info(f"Error Decoding JSON : {str(e)}")
            raise InvalidPayload()

        submission = parse_submission(payload)

        handler_logger.info(f"""
        Contact form submission
            name: {submission.name}
            email: {mask_email(submission.email)}
            has_company: {bool(submission.company)}
            has_phone: {bool(submission.phone)}
        """)

        if self.spam_filter.is_honeypot_triggered(submission):
            # the bot gets the same answer as a person would, nothing is sent
            handler_logger.info(f"Honeypot triggered, discarding submission from : {mask_email(submission.email)}")
            return self._success(headers=cors_headers)

        pattern_name = self.spam_filter.suspicious_pattern(submission.email)
        if pattern_name:
            handler_logger.info(f"Suspicious email rejected, pattern: {pattern_name}")
            raise SuspiciousEmail()

        if self.emailer is None:
            handler_logger.error("SendGrid not initialized - cannot forward contact submission")
            raise EmailNotConfigured()

        try:
            await self.emailer.send_contact_submission(submission=submission)
        except EmailDispatchError as e:
            handler_logger.error(f"""
            SendGrid Error
                reason: {e.reason}
                status_code: {e.provider_status}
                body: {e.provider_body!r}
            """)
            raise

        return self._success(headers=cors_headers)

    @staticmethod
    def _success(headers: dict[str, str]) -> JSONResponse:
        content = ContactResponse(message=SUCCESS_MESSAGE).model_dump()
        return JSONResponse(content=content, status_code=200, headers=headers)
