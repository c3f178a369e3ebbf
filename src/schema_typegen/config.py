"""Environment-driven defaults shared by the CLI and the generators."""

import os

DEFAULT_ROOT_NAME = os.getenv("TYPEGEN_ROOT_NAME", "Root")
DEFAULT_LOG_LEVEL = os.getenv("TYPEGEN_LOG_LEVEL", "WARNING")

NO_SCHEMAS_PLACEHOLDER = "// no schemas"
