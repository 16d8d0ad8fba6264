import os

_BACKEND_ROOT = os.path.dirname(os.path.abspath(__file__))


def _env_flag(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def _env_list(name, default):
    value = os.environ.get(name)
    if value is None:
        return default
    return [item.strip() for item in value.split(',') if item.strip()]


class Config:
    APP_ENV = os.environ.get('APP_ENV', 'development')
    PORT = int(os.environ.get('PORT', '3000'))
    # Cross-origin access to /api/*; wide open outside production
    CORS_ORIGINS = _env_list('CORS_ORIGINS', [] if APP_ENV == 'production' else '*')
    # Serve the built web client (and SPA fallback) from this process
    SERVE_CLIENT = _env_flag('SERVE_CLIENT', APP_ENV == 'production')
    CLIENT_DIST_DIR = os.environ.get('CLIENT_DIST_DIR') or os.path.abspath(
        os.path.join(_BACKEND_ROOT, '..', 'client', 'dist')
    )
