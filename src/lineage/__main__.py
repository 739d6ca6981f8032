"""
Showcase entry point: prints a derived child and a growing family.
Run: python -m lineage (from repo root, with .env or env vars set).
"""
import logging
import os
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/lineage/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from lineage.application import create_child_report, family_report

logging.basicConfig(
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    level=os.environ.get("LOG_LEVEL", "INFO").strip().upper() or "INFO",
)
logger = logging.getLogger(__name__)


def main() -> None:
    try:
        child = create_child_report()
        family = family_report()
    except ValueError:
        logger.exception("Could not build showcase records")
        raise SystemExit(1)
    logger.debug("Child derived: %r", child.child)
    print(child.describe())
    print(family.describe())


if __name__ == "__main__":
    main()
