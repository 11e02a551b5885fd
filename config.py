import os

SECRET_KEY = os.getenv("SECRET_KEY")

# Game state lives in the signed session cookie for the browser session only
SESSION_COOKIE_SECURE = os.getenv("SESSION_COOKIE_SECURE", "false").lower() in ("1", "true", "yes")
SESSION_COOKIE_SAMESITE = "Lax"

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

PLAYER_NAME_MAX_LENGTH = int(os.getenv("PLAYER_NAME_MAX_LENGTH", "40"))

# Jinja2 whitespace control - prevents unwanted line breaks in rendered HTML
JINJA2_TRIM_BLOCKS = True
JINJA2_LSTRIP_BLOCKS = True
