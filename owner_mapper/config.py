import os

from dotenv import load_dotenv


# Try to load .env from multiple locations
for env_path in [".env", os.path.expanduser("~/.env")]:
    if os.path.exists(env_path):
        load_dotenv(dotenv_path=env_path)
        break
else:
    load_dotenv()  # fallback to default behavior


def _split_list(value):
    return [item.strip() for item in (value or "").split(",") if item.strip()]


COUNTY = os.getenv("OWNER_MAPPER_COUNTY")

BASE_DIR = os.path.abspath(".")
OUTPUT_DIR = os.getenv("OWNER_MAPPER_OUTPUT_DIR", "owners")
OUTPUT_FILE = os.getenv("OWNER_MAPPER_OUTPUT_FILE", "owner_data.json")
SUMMARY_FILE = "owner_summary.csv"
LOG_DIR = os.getenv("OWNER_MAPPER_LOG_DIR", "logs")
LOG_LEVEL = os.getenv("OWNER_MAPPER_LOG_LEVEL", "INFO").upper()

EXTRA_COMPANY_KEYWORDS = _split_list(os.getenv("OWNER_MAPPER_EXTRA_COMPANY_KEYWORDS"))

MAX_WORKERS = int(os.getenv("OWNER_MAPPER_MAX_WORKERS", "4"))
HTTP_TIMEOUT = float(os.getenv("OWNER_MAPPER_HTTP_TIMEOUT", "30"))

# Default input documents looked up in the working directory, in order
DEFAULT_INPUTS = ["input.html", "input.json"]
