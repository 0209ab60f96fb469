#!/usr/bin/env python3
"""
Server entry point for the Complexity Analyzer backend.
"""
import uvicorn
from app.config import settings, logger


def main():
    """Run the server."""
    logger.info(f"Starting Complexity Analyzer on {settings.HOST}:{settings.PORT}")
    if settings.SIMULATED_DELAY_SECONDS > 0:
        logger.info(f"Each analysis is delayed by {settings.SIMULATED_DELAY_SECONDS:.2f}s")
    else:
        logger.info("Simulated analysis delay disabled")

    uvicorn.run(
        "app.main:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.DEBUG,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
