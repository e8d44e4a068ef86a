import os
from dotenv import load_dotenv

load_dotenv()

# =====================================
# Global configuration for Ligas API
# =====================================

BASE_DIR = os.path.dirname(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

# TEST_MODE:
# When True, testing features are enabled.
# Example uses:
#   - No log file is written even when LOG_DIR is set
#   - Reported by /health so test deployments are easy to spot
TEST_MODE = os.getenv("TEST_MODE", "False").lower() == "true"

# Debug switches log level to DEBUG
DEBUG = os.getenv("DEBUG", "False").lower() == "true"

# --- Database ---
DATABASE_URL = os.getenv("DATABASE_URL", f"sqlite:///{os.path.join(BASE_DIR, 'ligas.db')}")
SQL_ECHO = os.getenv("SQL_ECHO", "False").lower() == "true"
SQLITE_BUSY_TIMEOUT_SECONDS = float(os.getenv("SQLITE_BUSY_TIMEOUT_SECONDS", "30"))

# --- Tokens ---
JWT_SECRET = os.getenv("JWT_SECRET", "change-me-ligas-api-development-secret-key")
JWT_ALGORITHM = os.getenv("JWT_ALGORITHM", "HS256")
JWT_EXPIRATION_MINUTES = int(os.getenv("JWT_EXPIRATION_MINUTES", "60"))

# --- Seeded admin account ---
ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@upiiz.com")
ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "Admin12345")
ADMIN_NAME = os.getenv("ADMIN_NAME", "ADMIN")

# --- Logging ---
# When set, logs are also written to a daily file in this directory.
LOG_DIR = os.getenv("LOG_DIR")

# Roles understood by the auth layer
ROLE_USER = "ROLE_USER"
ROLE_ADMIN = "ROLE_ADMIN"
