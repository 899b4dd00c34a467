import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Catalog search used to fill a session's track pool
    CATALOG_SEARCH_TERM = os.environ.get('CATALOG_SEARCH_TERM', 'pop')
    CATALOG_RESULT_LIMIT = int(os.environ.get('CATALOG_RESULT_LIMIT', '10'))
    # Optional: two-letter store country (e.g. 'us'). Empty means iTunes default.
    CATALOG_COUNTRY = os.environ.get('CATALOG_COUNTRY') or None
    CATALOG_TIMEOUT_SEC = int(os.environ.get('CATALOG_TIMEOUT_SEC', '10'))
    ITUNES_BASE_URL = os.environ.get('ITUNES_BASE_URL', 'https://itunes.apple.com')
    DEEZER_BASE_URL = os.environ.get('DEEZER_BASE_URL', 'https://api.deezer.com')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
