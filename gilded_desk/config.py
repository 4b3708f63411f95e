import os
from dotenv import load_dotenv

load_dotenv(dotenv_path=".env")

# Storage
DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))
STATIC_DIR = os.getenv("STATIC_DIR", os.path.join(os.getcwd(), "public"))

# Session cookie
SESSION_SECRET = os.getenv("SESSION_SECRET", "temporary_dev_secret")
SESSION_COOKIE_NAME = os.getenv("SESSION_COOKIE_NAME", "gilded_session")
SESSION_MAX_AGE_DAYS = int(os.getenv("SESSION_MAX_AGE_DAYS", "7"))
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() == "true"

# Stripe
STRIPE_SECRET_KEY = os.getenv("STRIPE_SECRET_KEY")
STRIPE_WEBHOOK_SECRET = os.getenv("STRIPE_WEBHOOK_SECRET")
STRIPE_PRICE_ID = os.getenv("STRIPE_PRICE_ID")
WEBHOOK_TOLERANCE_SECONDS = int(os.getenv("WEBHOOK_TOLERANCE_SECONDS", "300"))

CLIENT_URL = os.getenv("CLIENT_URL", "http://localhost:3000")
