import os
from urllib.parse import quote_plus


def database_uri(env=os.environ) -> str:
    """Resolve the SQLAlchemy URI: explicit ``DATABASE_URI``, then an Oracle DSN, then SQLite."""
    uri = env.get('DATABASE_URI')
    if uri:
        return uri

    dsn = env.get('DB_DSN')
    if not dsn:
        return 'sqlite:///equipment.db'

    # DSN in Easy Connect form: host:port/service
    host_port, _, service = dsn.partition('/')
    user = quote_plus(env.get('DB_USER', ''))
    password = quote_plus(env.get('DB_PASSWORD', ''))
    uri = f'oracle+oracledb://{user}:{password}@{host_port}'
    if service:
        uri += f'/?service_name={service}'
    return uri


def engine_options(uri: str, lib_dir: str | None) -> dict:
    """Engine kwargs; Oracle switches to thick mode when a client library dir is set."""
    if uri.startswith('oracle') and lib_dir:
        return {'thick_mode': {'lib_dir': lib_dir}}
    return {}


class Config:
    SQLALCHEMY_DATABASE_URI = database_uri()
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    ORACLE_CLIENT_LIB_DIR = os.getenv('ORACLE_CLIENT_LIB_DIR')
    SQLALCHEMY_ENGINE_OPTIONS = engine_options(SQLALCHEMY_DATABASE_URI, ORACLE_CLIENT_LIB_DIR)
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    PORT = int(os.getenv('PORT', '3000'))
