import os

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup, escape

from contact_form.models import ContactSubmission


def nl2br(value: str) -> Markup:
    """escapes value then turns line breaks into <br> tags"""
    return Markup("<br>\n").join(escape(line) for line in value.splitlines())


env = Environment(loader=FileSystemLoader(os.path.dirname(os.path.abspath(__file__))),
                  autoescape=select_autoescape(enabled_extensions=('html',), default_for_string=True),
                  keep_trailing_newline=False)
env.filters['nl2br'] = nl2br


class EmailTemplate:
    """
        Used to create the contact notification email bodies, based on Jinja2
        html templates are autoescaped, everything the submitter typed is treated as untrusted
    """

    def __init__(self, template=None):
        self.template = env.get_template(template)

    def render(self, **kwargs):
        return self.template.render(**kwargs)

    @staticmethod
    async def contact_submission_html(submission: ContactSubmission) -> str:
        template = "contact_submission.html"
        return EmailTemplate(template).render(submission=submission)

    @staticmethod
    async def contact_submission_text(submission: ContactSubmission) -> str:
        template = "contact_submission.txt"
        return EmailTemplate(template).render(submission=submission).strip()
