"""Configuration settings for the workshop appointment book."""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Config:
    """Application configuration from environment variables."""

    # Backup Configuration
    BACKUP_DIR: str = os.getenv('BACKUP_DIR', 'backups')

    # Logging Configuration
    LOG_LEVEL: str = os.getenv('LOG_LEVEL', 'INFO')
    LOG_FILE: str = os.getenv('LOG_FILE', 'logs/app.log')


# Global config instance
config = Config()
