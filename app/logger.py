# app/logger.py

import logging
from logging.handlers import RotatingFileHandler
import os
import sys
import json
from datetime import datetime, timezone

from app.config import get_settings

# Attributes the request middleware attaches through `extra=`
REQUEST_FIELDS = ("method", "path", "status_code", "duration_ms", "client")


# Custom JSON Formatter
class JsonFormatter(logging.Formatter):
  def format(self, record):
    log_record = {
      "timestamp": datetime.now(timezone.utc).isoformat(),
      "level": record.levelname,
      "logger": record.name,
      "message": record.getMessage(),
      "file": record.pathname,
      "line": record.lineno,
      "function": record.funcName
    }

    for field in REQUEST_FIELDS:
      if hasattr(record, field):
        log_record[field] = getattr(record, field)

    if record.exc_info:
      log_record["exception"] = self.formatException(record.exc_info)

    return json.dumps(log_record, default=str)


json_formatter = JsonFormatter()


def configure_logging():
  settings = get_settings()
  env = settings.APP_ENV

  log_dir = settings.LOG_DIR
  app_log_file = os.path.join(log_dir, "app.log")
  test_log_file = os.path.join(log_dir, "test.log")

  os.makedirs(log_dir, exist_ok=True)

  # Root logger
  logger = logging.getLogger()
  if env in ("testing", "development"):
    logger.setLevel(logging.DEBUG)
  else:
    logger.setLevel(logging.INFO)

  # Clear previous handler
  if logger.hasHandlers():
    logger.handlers.clear()

  # --- Console (stdout) logger, errors only ---
  console_handler = logging.StreamHandler(sys.stdout)
  console_handler.setFormatter(json_formatter)
  console_handler.setLevel(logging.ERROR)
  logger.addHandler(console_handler)

  # test.log while testing, app.log otherwise
  if env == "testing":
    file_handler = RotatingFileHandler(test_log_file, maxBytes=1*1024*1024, backupCount=1, encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
  else:
    file_handler = RotatingFileHandler(app_log_file, maxBytes=5*1024*1024, backupCount=3, encoding="utf-8")
    file_handler.setLevel(logging.INFO)
  file_handler.setFormatter(json_formatter)
  logger.addHandler(file_handler)

  # SQL echo stays off, uvicorn access log is replaced by the request middleware
  logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
  logging.getLogger("uvicorn.access").disabled = True


def get_logger(name):
  """
  Returns a logger object with specific name.
  configure_logging() must be called before the first record is emitted.
  """
  return logging.getLogger(name)
