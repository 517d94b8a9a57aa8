"""
API server entry point

Usage:
    gym-agent-api
    # OR
    python -m gym_agent.server
"""

import uvicorn
from loguru import logger

from gym_agent.config.settings import PROJECT_ROOT, settings


def main(host: str = "0.0.0.0", port: int = 8000, reload: bool = False):
    """Start the FastAPI server"""
    logger.info("=" * 80)
    logger.info(f"{settings.system_name} Gym Equipment Assistant - API Server")
    logger.info("=" * 80)
    logger.info(f"Server will be available at: http://localhost:{port}")
    logger.info(f"API Documentation: http://localhost:{port}/docs")
    logger.info(f"Health Check: http://localhost:{port}/health")
    logger.info(f"Chat Streaming: POST http://localhost:{port}/chat")
    logger.info("Press CTRL+C to stop the server")
    logger.info("=" * 80)

    uvicorn.run(
        "gym_agent.api.app:app",
        host=host,
        port=port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
        reload_dirs=[str(PROJECT_ROOT / "gym_agent")] if reload else None,
    )


if __name__ == "__main__":
    main()
