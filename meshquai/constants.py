"""
mesh-quai Constants

This module consolidates the environment variable names, defaults and
version information used throughout the middleware.
"""

# =============================================================================
# ENVIRONMENT VARIABLES
# =============================================================================
# Read to determine mode (ONLINE / OFFLINE).
MODE_ENV = "MODE"

# Read to determine the target network (MAINNET / ORCHARD / LOCAL).
NETWORK_ENV = "NETWORK"

# Read to determine the port the Rosetta API binds to.
PORT_ENV = "PORT"

# Optional. Connects the middleware to an already running go-quai node.
GO_QUAI_ENV = "GOQUAI"

# Optional. Skips go-quai `admin` calls, which hosted node services
# typically do not support. Defaults to false.
SKIP_GO_QUAI_ADMIN_ENV = "SKIP_GO_QUAI_ADMIN"


# =============================================================================
# DEFAULTS
# =============================================================================
# Used when GO_QUAI_ENV is not populated.
DEFAULT_GO_QUAI_URL = "http://localhost:8545"

# Default location for all persistent data.
DATA_DIRECTORY = "/data"

MIDDLEWARE_VERSION = "0.0.4"


# =============================================================================
# LOGGING
# =============================================================================
LOGGER_DEFAULTS = {
    'LOG_LEVEL':                'INFO',
    'LOG_FORMAT':               '%(asctime)s - %(levelname)s - %(name)s - %(message)s',
    'LOG_DATE_FORMAT':          '%Y-%m-%dT%H:%M:%S',
    'LOG_CONSOLE_HIGHLIGHTING': 'True',
    'LOG_FILE':                 '',
}

LOG_MAX_FILE_SIZE = 10 * 1024 * 1024  # 10MB
LOG_BACKUP_COUNT = 5
