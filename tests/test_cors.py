from contact_form.config import CorsSettings
from contact_form.cors import CorsPolicy


def test_origins_are_split_and_trimmed():
    cors_settings = CorsSettings(ALLOWED_ORIGINS=" https://a.example.com ,,https://b.example.com,")
    assert cors_settings.origins == ["https://a.example.com", "https://b.example.com"]


def test_exact_match_only():
    policy = CorsPolicy(allowed_origins=["https://www.example.com"])
    assert policy.is_allowed("https://www.example.com")
    assert not policy.is_allowed("https://www.example.com.evil.io")
    assert not policy.is_allowed("http://www.example.com")
    assert not policy.is_allowed(None)
    assert not policy.is_allowed("")


def test_headers_for_allowed_origin():
    policy = CorsPolicy.from_settings(CorsSettings(ALLOWED_ORIGINS="https://www.example.com", CORS_MAX_AGE=600))
    headers = policy.headers("https://www.example.com")
    assert headers["Access-Control-Allow-Origin"] == "https://www.example.com"
    assert headers["Access-Control-Max-Age"] == "600"
    assert headers["Vary"] == "Origin"


def test_no_headers_for_unknown_origin():
    policy = CorsPolicy(allowed_origins=["https://www.example.com"])
    assert policy.headers("https://malicious-site.com") == {}
