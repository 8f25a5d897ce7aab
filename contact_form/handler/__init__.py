from contact_form.handler.handler import ContactFormHandler, SUCCESS_MESSAGE
