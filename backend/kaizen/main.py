"""
FastAPI Application Entry Point
"""
import logging
from fastapi import FastAPI
from kaizen import __version__
from kaizen.routes import habits, completions, reports, health

# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    datefmt='%Y-%m-%d %H:%M:%S'
)

# Silence noisy third-party loggers
logging.getLogger('httpx').setLevel(logging.WARNING)
logging.getLogger('httpcore').setLevel(logging.WARNING)

logger = logging.getLogger(__name__)

app = FastAPI(
    title="Kaizen API",
    version=__version__
)

# Register routes
app.include_router(health.router)
app.include_router(habits.router)
app.include_router(completions.router)
app.include_router(reports.router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="0.0.0.0", port=8000)
