from contact_form.config.config import config_instance, Settings, EmailSettings, CorsSettings, Logging
