import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
	APP_NAME = "FoodLink"
	DATABASE_URL = os.getenv("DATABASE_URL", "sqlite:///./foodlink.db")

	JWT_SECRET = os.getenv("JWT_SECRET", "dev-secret-change-me")
	JWT_ALG = "HS256"

	ACCESS_TOKEN_EXPIRES_MIN = int(os.getenv("ACCESS_TOKEN_EXPIRES_MIN", "60"))

	FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:3000")

	LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

	HOST = os.getenv("HOST", "0.0.0.0")
	PORT = int(os.getenv("PORT", "5000"))

settings = Settings()
