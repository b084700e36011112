# src/config/version.py

APP_VERSION = "0.3.0"
PROJECT_NAME = "Newfoundland Energy Project"
