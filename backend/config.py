import os


def _split(value):
    return [v.strip() for v in value.split(',') if v.strip()]


class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Browser frontends allowed to call the API (comma separated)
    CORS_ALLOWED_ORIGINS = _split(os.environ.get('CORS_ALLOWED_ORIGINS', 'http://localhost:5173,http://127.0.0.1:5173'))
    SCOREBOARD_URL_PREFIX = os.environ.get('SCOREBOARD_URL_PREFIX', '/vk/scoreboard')
    # When true, reading the summary also re-orders positions into ranked order
    SCOREBOARD_REORDER_ON_SUMMARY = os.environ.get('SCOREBOARD_REORDER_ON_SUMMARY', 'true').lower() in ('1', 'true', 'yes')
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
