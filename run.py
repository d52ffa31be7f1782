import subprocess
import sys
import logging

# Setup basic logging for run.py
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s | %(levelname)-8s | %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S"
)
logger = logging.getLogger(__name__)


def run(port: int = 8000):
    logger.info("Starting Recipe Safety Validation API (Uvicorn)...")
    api = subprocess.Popen(
        ["uvicorn", "recipe_safety.main:app", "--reload", "--port", str(port)],
        stdout=sys.stdout,
        stderr=sys.stderr
    )
    logger.info(f"   API:  http://localhost:{port}")
    logger.info(f"   Docs: http://localhost:{port}/docs")
    logger.info("Press Ctrl+C to stop.")

    try:
        api.wait()
    except KeyboardInterrupt:
        logger.info("Stopping API...")
        api.terminate()
        logger.info("Done.")


if __name__ == "__main__":
    run()
