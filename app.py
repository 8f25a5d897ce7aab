import uvicorn

from contact_form.config import config_instance
from contact_form.main.main import create_app
from contact_form.utils.utils import is_development

app = create_app()


if __name__ == '__main__':
    # Start the FastAPI app
    settings = config_instance()
    if is_development(settings):
        uvicorn.run("app:app", host="127.0.0.1", port=settings.PORT, reload=True, workers=1)
    else:
        uvicorn.run("app:app", host="0.0.0.0", port=settings.PORT, reload=False, workers=1)
