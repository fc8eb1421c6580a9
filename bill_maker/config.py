# config.py
import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

# project root = .../bill_maker
BASE_DIR = Path(__file__).resolve().parent

DATA_DIR = Path(os.getenv("BILL_MAKER_DATA_DIR", BASE_DIR / "data"))
FONT_SOURCE = os.getenv("BILL_MAKER_FONT", str(BASE_DIR / "fonts" / "CustomFont.ttf"))
FONT_TIMEOUT = float(os.getenv("BILL_MAKER_FONT_TIMEOUT", "5.0"))
LOG_LEVEL = os.getenv("BILL_MAKER_LOG_LEVEL", "INFO").upper()

ORG_NAME = os.getenv("BILL_MAKER_ORG_NAME", "TUSUKA TROUSERS LTD.")
ORG_ADDRESS = os.getenv("BILL_MAKER_ORG_ADDRESS", "KONABARI,GAZIPUR")

# key under which the employee list lives in the store
EMPLOYEE_STORE_KEY = "tusuka_employees"

DEFAULT_NIGHT_RATE = 350
NIGHT_RATE_OPTIONS = [350, 250]

SUGGESTION_LIMIT = 10
