from python_http_client.exceptions import HTTPError
from sendgrid import SendGridAPIClient
from sendgrid.helpers.mail import From, Mail, ReplyTo
from fastapi.concurrency import run_in_threadpool

from contact_form.config import Settings
from contact_form.email.templates import EmailTemplate
from contact_form.errors import EmailDispatchError
from contact_form.models import ContactSubmission
from contact_form.utils.my_logger import init_logger

email_logger = init_logger("email-logger")


class Emailer:
    """
        Emailing Class, wraps the SendGrid client used to forward contact submissions to the operator.
        created once at start up and handed to the contact handler
    """

    def __init__(self, api_key: str, sender_email: str, recipient_email: str,
                 sender_name: str | None = None, server: SendGridAPIClient | None = None):
        self.sender_email = sender_email
        self.sender_name = sender_name
        self.recipient_email = recipient_email
        self.server = server or SendGridAPIClient(api_key)

    @staticmethod
    async def create_message(sender: From, recipient_email: str, reply_to: ReplyTo,
                             subject: str, text: str, html: str) -> Mail:
        """Create the message with plain-text and HTML versions."""
        message = Mail(
            from_email=sender,
            to_emails=recipient_email,
            subject=subject,
            plain_text_content=text,
            html_content=html)
        message.reply_to = reply_to
        return message

    async def send_email(self, message: Mail) -> None:
        """
            Send the email through the SendGrid API, the client is blocking so it runs on the threadpool
        :raises EmailDispatchError: provider rejected the message or could not be reached
        """
        try:
            response = await run_in_threadpool(self.server.send, message)
        except HTTPError as http_err:
            raise EmailDispatchError(reason="SendGrid rejected the message",
                                     provider_status=getattr(http_err, 'status_code', None),
                                     provider_body=getattr(http_err, 'body', None)) from http_err
        except OSError as net_err:
            raise EmailDispatchError(reason=f"SendGrid could not be reached: {net_err}") from net_err
        except Exception as err:
            raise EmailDispatchError(reason=f"SendGrid client failed: {err!r}") from err

        if response.status_code not in [200, 201, 202]:
            raise EmailDispatchError(reason="SendGrid returned an unexpected status",
                                     provider_status=response.status_code, provider_body=response.body)

    async def send_contact_submission(self, submission: ContactSubmission,
                                      templates: EmailTemplate = EmailTemplate) -> None:
        """Send the contact notification email to the operator, replies go to the submitter."""
        subject = f"New Contact Form Submission from {submission.name}"
        text = await templates.contact_submission_text(submission=submission)
        html = await templates.contact_submission_html(submission=submission)

        message_dict = dict(sender=From(self.sender_email, self.sender_name),
                            recipient_email=self.recipient_email,
                            reply_to=ReplyTo(submission.email, submission.name),
                            subject=subject, text=text, html=html)

        await self.send_email(message=await self.create_message(**message_dict))
        email_logger.info(f"Contact email sent to : {self.recipient_email}")


def create_emailer(settings: Settings) -> Emailer | None:
    """
    **create_emailer**
        returns None when no SendGrid API key is configured
    :param settings:
    :return:
    """
    email_settings = settings.EMAIL_SETTINGS
    if not email_settings.is_configured:
        email_logger.warning("SENDGRID_API_KEY not set - email sending will be disabled")
        return None

    return Emailer(api_key=email_settings.SENDGRID_API_KEY.strip(),
                   sender_email=email_settings.EMAIL_FROM,
                   recipient_email=email_settings.CONTACT_EMAIL,
                   sender_name=email_settings.EMAIL_FROM_NAME)
