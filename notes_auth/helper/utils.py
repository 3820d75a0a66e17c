import logging
import os
import requests
from fastapi.concurrency import run_in_threadpool
from concurrent_log_handler import ConcurrentRotatingFileHandler
from ..config.settings import get_settings


def setup_logging():
    logger = logging.getLogger("auth_log") # create logger
    if not logger.handlers: # check if handlers already exist
        logger.setLevel(logging.INFO) # set log level

        # create log directory if it doesn't exist
        log_dir = get_settings().LOG_DIR
        os.makedirs(log_dir, exist_ok=True)

        # create a file handler
        file_handler = ConcurrentRotatingFileHandler(
            os.path.join(log_dir, "auth.log"),
            maxBytes=10000, # 10KB
            backupCount=500
        )
        file_handler.setLevel(logging.INFO)

        #  create a console handler
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.INFO)

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
    """Forward a log event to the central logging service, when one is configured."""
    url = get_settings().LOG_SERVICE_URL
    if not url:
        return None

    log = {
         "log_type": log_type,
         "message": message}
    headers = {
        "X-Source-Endpoint": head}

    try:
        resp = requests.post(url, json=log, headers=headers, timeout=5)
    except requests.RequestException as e:
        logger.warning(f"Could not reach logging service at {url}: {e}")
        return None
    return resp


async def log_event(log_type: str, message: str, head: str):
    """Run create_new_log in a worker thread so the HTTP call does not block the event loop."""
    return await run_in_threadpool(create_new_log, log_type, message, head)


def serialize_user(record: dict) -> dict:
    """Return a user document safe to send to clients: string id, no password digest."""
    user = {key: value for key, value in record.items() if key != "password"}
    if user.get("_id") is not None:
        user["_id"] = str(user["_id"])
    return user


def user_id(record: dict):
    _id = record.get("_id")
    return str(_id) if _id is not None else None
