"""Run the gateway with uvicorn: python -m loan_gateway"""

import uvicorn

from loan_gateway.config import settings


def main() -> None:
    uvicorn.run("loan_gateway.api.main:app", host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
