"""
Main entrypoint: run the WalletGuard FastAPI server with uvicorn.

Env: MORALIS_API_KEY, MORALIS_BASE_URL, API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT.

Equivalent: uvicorn backend_walletguard.api_server.app:app --host 0.0.0.0 --port 8000
"""

import os

# Configure structured JSON logging before other imports that may log
from backend_walletguard.walletguard_logging import get_logger

logger = get_logger("main")


def main() -> None:
    """Run the FastAPI server in the main thread."""
    from backend_walletguard.config.env import get_api_host, get_api_port, get_moralis_api_key

    api_host = get_api_host()
    api_port = get_api_port()
    if not get_moralis_api_key():
        logger.warning(
            "main_config_warning",
            message="MORALIS_API_KEY is not set; /api/getApprovals will answer 500 until it is",
        )

    from backend_walletguard.api_server.app import app
    import uvicorn

    logger.info("main_server_starting", host=api_host, port=api_port)
    uvicorn.run(app, host=api_host, port=api_port, log_level=os.getenv("LOG_LEVEL", "info").lower())


if __name__ == "__main__":
    main()
