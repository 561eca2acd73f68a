from pathlib import Path

from decouple import Csv
from decouple import config as decouple_config

from src.common.typings import Singleton

DEFAULT_NODE_ENDPOINT = '127.0.0.1:5052'
DEFAULT_CHUNK_SIZE = 500
DEFAULT_KEYS_FILE = 'keys.json'
DEFAULT_RESULTS_DIR = 'results'


# pylint: disable-next=too-many-instance-attributes
class Settings(metaclass=Singleton):
    node_endpoints: list[str]
    chunk_size: int
    keys_file: Path
    results_dir: Path
    webhook_url: str | None

    verbose: bool = False
    log_level: str
    log_format: str
    enable_file_logging: bool
    log_dir: Path

    beacon_timeout: int
    webhook_timeout: int
    sentry_dsn: str
    sentry_environment: str

    # pylint: disable-next=too-many-arguments
    def set(
        self,
        node_endpoints: str = DEFAULT_NODE_ENDPOINT,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        keys_file: str = DEFAULT_KEYS_FILE,
        results_dir: str = DEFAULT_RESULTS_DIR,
        webhook_url: str | None = None,
        verbose: bool = False,
        log_level: str | None = None,
        log_format: str | None = None,
        enable_file_logging: bool = False,
        log_dir: str | None = None,
    ) -> None:
        self.node_endpoints = [node.strip() for node in node_endpoints.split(',') if node.strip()]
        self.chunk_size = chunk_size
        self.keys_file = Path(keys_file)
        self.results_dir = Path(results_dir)
        self.webhook_url = webhook_url or None

        self.verbose = verbose
        self.log_level = log_level or 'INFO'
        self.log_format = log_format or LOG_PLAIN
        self.enable_file_logging = enable_file_logging
        self.log_dir = Path(log_dir) if log_dir else Path('.')

        self.beacon_timeout = decouple_config('BEACON_TIMEOUT', default=60, cast=int)
        self.webhook_timeout = decouple_config('WEBHOOK_TIMEOUT', default=10, cast=int)

        self.sentry_dsn = decouple_config('SENTRY_DSN', default='')
        self.sentry_environment = decouple_config('SENTRY_ENVIRONMENT', default='')


settings = Settings()

# environment defaults for the cli options
NODE_ENDPOINT: str = ','.join(
    decouple_config('NODE_ENDPOINT', default=DEFAULT_NODE_ENDPOINT, cast=Csv())
)
CHUNK_SIZE: int = decouple_config('CHUNK_SIZE', default=DEFAULT_CHUNK_SIZE, cast=int)
KEY_JSON_PATH: str = decouple_config('KEY_JSON_PATH', default=DEFAULT_KEYS_FILE)
RESULTS_DIR: str = decouple_config('RESULTS_DIR', default=DEFAULT_RESULTS_DIR)

# beacon node api
NODE_SYNCING_PATH = '/eth/v1/node/syncing'
VALIDATORS_BY_ID_PATH = '/eth/v1/beacon/states/head/validators'

# logging
LOG_PLAIN = 'plain'
LOG_JSON = 'json'
LOG_FORMATS = [LOG_PLAIN, LOG_JSON]
LOG_DATE_FORMAT = '%Y-%m-%d %H:%M:%S'
COMBINED_LOG_FILENAME = 'combined.log'
ERROR_LOG_FILENAME = 'error.log'

# reports
REPORT_FILENAME_PREFIX = 'results'
REPORT_TIMESTAMP_FORMAT = '%Y-%m-%d_%H-%M-%S'
