import logging
import os
import requests
from concurrent_log_handler import ConcurrentRotatingFileHandler
from dotenv import load_dotenv

load_dotenv()


def setup_logging():
    logger = logging.getLogger("auth_log") # create logger
    if not logger.handlers: # check if handlers already exist
        log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        logger.setLevel(log_level) # set log level

        # create log directory if it doesn't exist
        log_dir = os.getenv("LOG_DIR", "logs")
        os.makedirs(log_dir, exist_ok=True)

        # create a file handler
        file_handler = ConcurrentRotatingFileHandler(
            os.path.join(log_dir, "auth.log"),
            maxBytes=1024 * 1024, # 1MB
            backupCount=20
        )
        file_handler.setLevel(log_level)

        #  create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(log_level)

        # create a formatter
        formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s - %(pathname)s - %(filename)s - %(lineno)d" , datefmt="%Y-%m-%d %H:%M:%S")
        file_handler.setFormatter(formatter)
        console_handler.setFormatter(formatter)

        #  add the handlers to the logger
        logger.addHandler(file_handler)
        logger.addHandler(console_handler)
    return logger

logger = setup_logging()


def create_new_log(log_type: str, message: str, head: str):
    """
    Forward a log record to the central logging service, if one is configured.

    Delivery failures are logged locally and never propagate to the caller.
    """
    url = os.getenv("LOG_SERVICE_URL")
    if not url:
        return None

    log = {
         "log_type": log_type,
         "message": message}
    headers = {
        "X-Source-Endpoint": head}

    try:
        resp = requests.post(url, json=log, headers=headers, timeout=2)
    except requests.RequestException as e:
        logger.warning(f"Could not deliver log to logging service: {e.__class__.__name__}")
        return None
    return resp


def normalize_email(email: str) -> str:
    return email.strip().lower()
