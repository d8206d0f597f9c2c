# /run.py

import subprocess
import os
import sys

BASE_DIR = os.path.dirname(os.path.abspath(__file__))


def run_fastapi():
  from app.config import get_settings
  settings = get_settings()
  reload_flag = ["--reload"] if settings.APP_ENV == "development" else []
  subprocess.run([sys.executable, "-m", "uvicorn", "app.main:app",
                  "--host", settings.HOST, "--port", str(settings.PORT), *reload_flag], cwd=BASE_DIR)


def clear_db():
  from app.logger import configure_logging
  from app.database import clear_database
  configure_logging()
  try:
    clear_database()
  except Exception as e:
    print(f"Error clearing database: {e}", file=sys.stderr)
    sys.exit(1)
  print("Database cleared")


if __name__ == "__main__":
  if len(sys.argv) > 1 and sys.argv[1] == "--clear":
    clear_db()
  else:
    run_fastapi()
