"""Configuration module for the token report application."""
import os
from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# Application settings
DEBUG = os.environ.get("DEBUG", "False").lower() in ["true", "1", "yes"]

# Folder paths
DATA_FOLDER = os.environ.get("DATA_FOLDER", "data")
LOGS_FOLDER = os.environ.get("LOGS_FOLDER", "logs")

# Default input files, resolved against DATA_FOLDER
COMPANIES_FILE = os.environ.get("COMPANIES_FILE", "companies.json")
USERS_FILE = os.environ.get("USERS_FILE", "users.json")

# Log rotation (bytes, backups)
APP_LOG_MAX_BYTES = 5 * 1024 * 1024
APP_LOG_BACKUPS = 5
ERROR_LOG_MAX_BYTES = 2 * 1024 * 1024
ERROR_LOG_BACKUPS = 10
DEBUG_LOG_MAX_BYTES = 10 * 1024 * 1024
DEBUG_LOG_BACKUPS = 3
