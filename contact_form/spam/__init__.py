import re

from contact_form.models import ContactSubmission

# Patterns for addresses which are almost always typed in by bots or people testing the form
suspicious_email_patterns = {
    "consecutive_digits": r"\d{10,}",
    "repeated_characters": r"(.)\1{4,}",
    "placeholder_address": r"^(?:test@test|example@example|asdf@asdf)\.",
}


class SpamFilter:
    """
        **SpamFilter**
            honeypot check and suspicious email address check,
            only ever run on a submission which already passed validation
    """

    def __init__(self, patterns: dict[str, str] | None = None):
        _patterns = suspicious_email_patterns if patterns is None else patterns
        self.patterns: dict[str, re.Pattern] = {name: re.compile(pattern, re.IGNORECASE)
                                                for name, pattern in _patterns.items()}

    @staticmethod
    def is_honeypot_triggered(submission: ContactSubmission) -> bool:
        return bool(submission.honeypot and submission.honeypot.strip())

    def suspicious_pattern(self, email: str) -> str | None:
        """
            **suspicious_pattern**
                name of the first pattern the address matches, None if it looks fine
        :param email:
        :return:
        """
        for name, pattern in self.patterns.items():
            if pattern.search(email):
                return name
        return None

    def is_suspicious_email(self, email: str) -> bool:
        return self.suspicious_pattern(email) is not None
