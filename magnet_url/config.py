import os
import tempfile
import dotenv


dotenv.load_dotenv()


# Defaults
VERBOSE = False
LOG_PATH = ""
LOG_LEVEL = "INFO"
LOG_ROTATION = "1 week"
LOG_RETENTION = "1 month"

# Lenient parsing matches the reference behaviour; strict is opt-in
STRICT_PARSING = False


class Config:
    VERBOSE = os.getenv("MAGNET_URL_VERBOSE", str(VERBOSE)).lower() == "true"

    LOG_PATH = os.getenv("MAGNET_URL_LOG_PATH", LOG_PATH)
    LOG_LEVEL = os.getenv("MAGNET_URL_LOG_LEVEL", LOG_LEVEL)
    LOG_ROTATION = os.getenv("MAGNET_URL_LOG_ROTATION", LOG_ROTATION)
    LOG_RETENTION = os.getenv("MAGNET_URL_LOG_RETENTION", LOG_RETENTION)

    STRICT_PARSING = os.getenv("MAGNET_URL_STRICT_PARSING", str(STRICT_PARSING)).lower() == "true"


class TestConfig:
    LOG_PATH = tempfile.NamedTemporaryFile().name
    LOG_LEVEL = "DEBUG"
