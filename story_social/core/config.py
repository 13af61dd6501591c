# story_social/core/config.py

import os

class Config:
    """Settings shared by every environment."""
    # Firebase Cloud Storage bucket that holds the comment/reaction documents.
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_STORAGE_BUCKET = os.getenv('FIREBASE_STORAGE_BUCKET')

    # 'firebase' or 'local'. The local backend keeps documents under LOCAL_STORAGE_ROOT.
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'firebase')
    LOCAL_STORAGE_ROOT = os.getenv('LOCAL_STORAGE_ROOT', os.path.join(os.getcwd(), '.storage'))

    # Document keys. Comments are one document per story, reactions one shared document.
    COMMENTS_PREFIX = os.getenv('COMMENTS_PREFIX', 'comments')
    REACTIONS_DOCUMENT = os.getenv('REACTIONS_DOCUMENT', 'reactions/reactions.json')

    # Default request log level; a request may override it with a LOG_LEVEL parameter.
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'info')

class DevelopmentConfig(Config):
    """Local development. Uses the filesystem backend unless told otherwise."""
    DEBUG = True
    STORAGE_BACKEND = os.getenv('STORAGE_BACKEND', 'local')
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)

class TestingConfig(Config):
    TESTING = True
    DEBUG = False
    STORAGE_BACKEND = 'local'
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH')

class ProductionConfig(Config):
    DEBUG = False

config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
