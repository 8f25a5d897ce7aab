from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from contact_form.config import Settings, config_instance
from contact_form.email import Emailer, create_emailer
from contact_form.errors import ContactFormError
from contact_form.handler import ContactFormHandler
from contact_form.models import ErrorResponse
from contact_form.utils.my_logger import init_logger

# used to logging debug information for the application
app_logger = init_logger("contact_form_app")

CONTACT_METHODS = ["OPTIONS", "POST", "GET", "PUT", "PATCH", "DELETE", "HEAD"]
GENERIC_ERROR_MESSAGE = "Internal server error. Please try again later."
SECURITY_HEADERS = {
    "X-Content-Type-Options": "nosniff",
    "X-Frame-Options": "DENY",
    "Strict-Transport-Security": "max-age=31536000; includeSubDomains"
}


def create_app(settings: Settings | None = None, emailer: Emailer | None = None) -> FastAPI:
    """
    **create_app**
        builds the contact form application, settings and emailer are loaded from the environment
        when they are not passed in

    :param settings: application settings, defaults to config_instance()
    :param emailer: SendGrid emailer, defaults to one built from settings (None if no API key is configured)
    :return: the FastAPI application
    """
    if settings is None:
        settings = config_instance()
    if emailer is None:
        emailer = create_emailer(settings)

    handler = ContactFormHandler(settings=settings, emailer=emailer)

    app = FastAPI(
        title="Contact Form",
        description="Receives contact form submissions from the website and forwards them by email",
        version="1.0.0",
        docs_url=None,
        openapi_url=None,
        redoc_url=None
    )
    app.state.settings = settings
    app.state.contact_handler = handler

    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #
    # # # # # # # # # # # # # # ERROR HANDLERS
    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #

    @app.exception_handler(ContactFormError)
    async def contact_form_error_handler(request: Request, exc: ContactFormError):
        """
        **contact_form_error_handler**
            renders gate and validation failures as JSON, CORS headers only go out for allowed origins
        :param request:
        :param exc:
        :return:
        """
        app_logger.info(f"""
        Contact Form Error

        Debug Information
            request_url: {request.url}
            request_method: {request.method}
            error_detail: {exc.message}
            status_code: {exc.status_code}
        """)
        content = ErrorResponse(error=exc.message, details=exc.details).model_dump(exclude_none=True)
        headers = handler.cors.headers(request.headers.get('origin'))
        return JSONResponse(status_code=exc.status_code, content=content, headers=headers)

    # noinspection PyUnusedLocal
    @app.exception_handler(Exception)
    async def handle_all_exceptions(request: Request, exc: Exception):
        app_logger.exception(f"Error processing request : {str(exc)}")
        content = ErrorResponse(error=GENERIC_ERROR_MESSAGE).model_dump(exclude_none=True)
        headers = handler.cors.headers(request.headers.get('origin'))
        # served outside the http middleware stack, so the security headers are set here as well
        headers.update(SECURITY_HEADERS)
        return JSONResponse(status_code=500, content=content, headers=headers)

    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #
    # # # # # # # # # # # # # # MIDDLE WARES
    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #

    @app.middleware("http")
    async def add_security_headers(request: Request, call_next):
        """adding security headers"""
        response = await call_next(request)
        response.headers.update(SECURITY_HEADERS)
        return response

    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #
    # # # # # # # # # # # # # # ROUTES
    # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # # #

    @app.api_route("/", methods=CONTACT_METHODS, include_in_schema=False)
    async def contact_form(request: Request):
        """
        **contact_form**
            every verb lands here so the handler can answer with the right JSON error
        :param request:
        :return:
        """
        return await handler.handle(request)

    # noinspection PyUnusedLocal
    @app.get("/_ah/warmup", include_in_schema=False)
    async def status_check(request: Request):
        return JSONResponse(content={'status': 'OK'}, status_code=200, headers={"Content-Type": "application/json"})

    app_logger.info(f"Contact form started, environment: {settings.ENVIRONMENT}, "
                    f"allowed origins: {len(handler.cors.allowed_origins)}, email enabled: {emailer is not None}")
    return app
