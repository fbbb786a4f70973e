import os


class Config:
    """Settings read from the environment."""

    REPO_DIR = os.environ.get("CODE_EXPLORER_REPO_DIR")
    HOST = os.environ.get("CODE_EXPLORER_HOST", "127.0.0.1")
    PORT = int(os.environ.get("CODE_EXPLORER_PORT", "3200"))
    LOG_LEVEL = os.environ.get("CODE_EXPLORER_LOG_LEVEL", "INFO")
