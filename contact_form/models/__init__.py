from contact_form.models.contact import ContactSubmission, ContactResponse, ErrorResponse, ErrorDetail, \
    parse_submission
