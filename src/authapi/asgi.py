"""
ASGI entry point.

Exposes the module-level `app` for uvicorn and serverless hosts. Importing this
module loads `config.toml` and the environment and fails if the store
credentials are missing.
"""

from authapi.main import create_app
from authapi.shared import load_config

app = create_app(load_config())
