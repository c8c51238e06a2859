"""Entry point for running the API server: python -m evmexplorer.api"""

import logging

import uvicorn
from dotenv import load_dotenv


def main() -> None:
    load_dotenv()

    from evmexplorer.api.app import create_app
    from evmexplorer.config import get_settings

    settings = get_settings()
    logging.basicConfig(
        level=settings.effective_log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    uvicorn.run(
        create_app(),
        host=settings.api_host,
        port=settings.api_port,
        log_level=settings.effective_log_level.lower(),
    )


if __name__ == "__main__":
    main()
