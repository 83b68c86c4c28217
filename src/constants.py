"""Constants used in the project."""

from enum import Enum


class ExitCodes(Enum):
    """Exit codes for the program.

    Args:
        Enum (int): Exit codes for the program.
    """

    SUCCESS = 0
    FILE_ERROR = 1
    CONNECTION_ERROR = 2
    INPUT_ERROR = 4
    RESOLUTION_ERROR = 5


class Constants:  # pylint: disable=too-few-public-methods
    """General constants used in the project.
    Data holder for configuration constants; not intended to provide behavior.
    """

    AZUL_BUNDLE_URL = "https://api.azul.com/zulu/download/community/v1.0/bundles/latest/"
    AZUL_ARCH = "x86"
    AZUL_EXT = "tar.gz"
    AZUL_HW_BITNESS = "64"
    AZUL_OS = "linux"
    AZUL_JAVAFX = "false"
    REQUEST_TIMEOUT = 30  # Timeout in seconds for all HTTP requests

    # Tool versions pinned into generated workflows
    GO_VERSION = "1.15"
    YJ_VERSION = "5.0.0"

    DESCRIPTOR_FILE = ".github/pipeline-descriptor.yml"
    PACKAGE_TOML_FILE = "package.toml"
    WORKFLOWS_DIR = ".github/workflows"

    INPUT_ENV_PREFIX = "INPUT_"
    ENV_LOG_LEVEL = "PIPELINE_BUILDER_LOG_LEVEL"
    LOG_FORMAT = "[%(levelname)s] %(message)s"
    LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
