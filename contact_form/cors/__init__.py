from contact_form.config import CorsSettings

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


class CorsPolicy:
    """
        **CorsPolicy**
            exact-match origin allow-list for the contact endpoint,
            headers are only ever produced for an allowed origin
    """

    def __init__(self, allowed_origins: list[str], max_age: int = 3600):
        self.allowed_origins: frozenset[str] = frozenset(allowed_origins)
        self.max_age = max_age

    @classmethod
    def from_settings(cls, cors_settings: CorsSettings) -> "CorsPolicy":
        return cls(allowed_origins=cors_settings.origins, max_age=cors_settings.CORS_MAX_AGE)

    def is_allowed(self, origin: str | None) -> bool:
        return bool(origin) and origin in self.allowed_origins

    def headers(self, origin: str | None) -> dict[str, str]:
        """
            **headers**
                CORS response headers for origin, empty if origin is not on the allow-list
        :param origin:
        :return:
        """
        if not self.is_allowed(origin):
            return {}

        return {
            'Access-Control-Allow-Origin': origin,
            'Access-Control-Allow-Methods': ALLOWED_METHODS,
            'Access-Control-Allow-Headers': ALLOWED_HEADERS,
            'Access-Control-Max-Age': str(self.max_age),
            'Vary': 'Origin'
        }
