"""DocExplain web demo: FastAPI backend + static frontend.

Run with ``uvicorn app:app --reload`` from this directory.
"""

from pathlib import Path

from docexplain.config import Settings
from docexplain.logging import setup_logging
from docexplain.web import create_app

APP_DIR = Path(__file__).parent
FRONTEND_DIR = APP_DIR / "frontend"

settings = Settings(frontend_dir=FRONTEND_DIR)
setup_logging(settings.log_level)

app = create_app(settings)
