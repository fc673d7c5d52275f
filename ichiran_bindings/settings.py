"""
Settings and configuration for ichiran-bindings.

Every value can be overridden through the environment.
"""

import os
import shlex

# Command used to run ichiran-cli. May carry a prefix, e.g.
# ICHIRAN_CLI="docker exec -i ichiran-main-1 ichiran-cli"
ICHIRAN_CLI = shlex.split(os.environ.get("ICHIRAN_CLI", "ichiran-cli"))

# Seconds to wait for ichiran-cli before giving up (0 disables the timeout)
TIMEOUT = float(os.environ.get("ICHIRAN_TIMEOUT", "30"))

# Default strictness of the structured-output decoder: "strict" or "lenient"
STRICTNESS = os.environ.get("ICHIRAN_STRICTNESS", "lenient").lower()

# Debug mode
DEBUG = os.environ.get("ICHIRAN_DEBUG", "").lower() in ("1", "true", "yes")
