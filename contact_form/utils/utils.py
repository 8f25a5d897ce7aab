"""
    **Module Utils**
     - Common Application Utilities
"""
import socket

from contact_form.config import Settings


def is_development(settings: Settings) -> bool:
    return settings.DEVELOPMENT_SERVER_NAME.casefold() == socket.gethostname().casefold()


def mask_email(email: str) -> str:
    """
        **mask_email**
            hides most of the local part of an address so it can be logged
    :param email:
    :return:
    """
    local, _, domain = email.partition('@')
    if not domain:
        return '***'
    return f"{local[:1]}***@{domain}"
