import os


def _flag(name, default="false"):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class BaseConfig:

    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", SECRET_KEY)
    JWT_EXPIRES_DAYS = int(os.getenv("JWT_EXPIRES_DAYS", "10"))

    SQLALCHEMY_DATABASE_URI = os.getenv("DB_URI", "sqlite:///./dev.db")
    SQLALCHEMY_ECHO = _flag("SQLALCHEMY_ECHO")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # Paystack
    PAYSTACK_SECRET_KEY = os.getenv("PAYSTACK_SECRET_KEY")
    PAYSTACK_BASE_URL = os.getenv("PAYSTACK_BASE_URL", "https://api.paystack.co")
    PAYSTACK_TIMEOUT = float(os.getenv("PAYSTACK_TIMEOUT", "15"))

    # "auto" picks sandbox or live from the PAYSTACK_SECRET_KEY prefix
    KYC_PROVIDER_MODE = os.getenv("KYC_PROVIDER_MODE", "auto")
    KYC_ACCEPT_HEURISTIC = _flag("KYC_ACCEPT_HEURISTIC", "true")
    KYC_REQUIRE_NAME_MATCH = _flag("KYC_REQUIRE_NAME_MATCH")

    # flask-limiter
    RATELIMIT_ENABLED = _flag("RATELIMIT_ENABLED", "true")
    RATELIMIT_STORAGE_URI = os.getenv("RATELIMIT_STORAGE_URI", "memory://")
    RATELIMIT_DEFAULT = os.getenv("RATELIMIT_DEFAULT", "200 per hour")
    KYC_RESOLVE_RATE_LIMIT = os.getenv("KYC_RESOLVE_RATE_LIMIT", "10 per minute")


class DevelopmentConfig(BaseConfig):
    DEBUG = True
    LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")


class ProductionConfig(BaseConfig):
    DEBUG = False
    KYC_ACCEPT_HEURISTIC = _flag("KYC_ACCEPT_HEURISTIC")


class TestingConfig(BaseConfig):
    TESTING = True
    SECRET_KEY = "test-secret"
    JWT_SECRET_KEY = "test-jwt-secret"
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    PAYSTACK_SECRET_KEY = "sk_test_dummy"
    KYC_PROVIDER_MODE = "sandbox"
    KYC_ACCEPT_HEURISTIC = True
    KYC_REQUIRE_NAME_MATCH = False
    RATELIMIT_ENABLED = False
