import os

from kycbank import create_app
from kycbank.config import DevelopmentConfig, ProductionConfig

config = ProductionConfig if os.getenv("APP_ENV") == "production" else DevelopmentConfig
app = create_app(config)

if __name__ == "__main__":
    print("🚀 Starting KYC service on http://0.0.0.0:5000")
    app.run(host="0.0.0.0", port=int(os.getenv("PORT", "5000")))
