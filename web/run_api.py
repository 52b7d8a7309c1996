"""Run the comment API server. Run from project root: python web/run_api.py"""
import logging
import sys
from pathlib import Path

# Add project root to path so sentiment imports work
_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_root))

import uvicorn

import config


def main() -> None:
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL.upper(), logging.INFO))
    # No reload: a reload starts a new process and the in-memory stores with it
    uvicorn.run("web.api.main:app", host=config.API_HOST, port=config.API_PORT)


if __name__ == "__main__":
    main()
