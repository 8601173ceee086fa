"""
Start the Wobot backend API with uvicorn.

    python -m backend.run
"""

import sys
from pathlib import Path

import uvicorn

# Add the root directory to the path
root_dir = Path(__file__).parent.parent
if str(root_dir) not in sys.path:
    sys.path.insert(0, str(root_dir))

from shared.config_manager import get_config


def main():
    """Serve the API on the configured host and port until terminated."""
    config = get_config()
    uvicorn.run(
        "backend.api.main:app",
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
    )


if __name__ == "__main__":
    main()
