# core/templates.py
from pathlib import Path

from fastapi.templating import Jinja2Templates

from config.settings import settings
from modules.employee_profile.dates import format_display_date

_TEMPLATES_DIR = Path(settings.TEMPLATES_DIR)
if not _TEMPLATES_DIR.is_absolute():
    _TEMPLATES_DIR = Path(__file__).resolve().parent.parent / _TEMPLATES_DIR

templates = Jinja2Templates(directory=str(_TEMPLATES_DIR))
templates.env.filters["display_date"] = format_display_date
