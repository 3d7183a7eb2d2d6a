import logging

from flask import Flask

from kycbank.config import DevelopmentConfig
from kycbank.extensions import init_db, init_limiter


def configure_logging(app: Flask):
    """
    app.logger is the "kycbank" logger, so module loggers
    (kycbank.utils.*) inherit its level and handler.
    """
    app.logger.setLevel(app.config.get("LOG_LEVEL", "INFO"))
    logging.captureWarnings(True)


def create_app(config_object=None):
    app = Flask(__name__, instance_relative_config=False)

    if config_object is None:
        config_object = DevelopmentConfig
    app.config.from_object(config_object)

    configure_logging(app)
    init_db(app)
    init_limiter(app)

    from kycbank.utils.kyc.service import KycService
    from kycbank.utils.verification_utils.factory import get_provider

    provider = get_provider(app.config)
    app.extensions["kyc_provider"] = provider
    app.extensions["kyc_service"] = KycService.from_config(provider, app.config)

    from kycbank.handlers.kyc import kyc_bp

    app.register_blueprint(kyc_bp)

    app.logger.info("KYC service ready (provider=%s)", provider.name)
    return app
