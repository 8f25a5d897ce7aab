from contact_form.email.email import Emailer, create_emailer
