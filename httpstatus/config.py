"""
Configuration variables read from the environment at import time
"""
from httpstatus.env import Env

# Level of the stderr sink added by httpstatus.utilities.logs.set_logger
LOG_LEVEL: str = Env.get("LOGURU_LEVEL", "INFO")

# When enabled, asking the reason phrase of an unregistered code is an error
STRICT_LOOKUPS: bool = Env.get_bool("HTTPSTATUS_STRICT_LOOKUPS")
