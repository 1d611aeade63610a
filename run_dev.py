#!/usr/bin/env python3
"""
Development server runner: bootstraps .env, checks provider credentials and
starts uvicorn with reload on the configured host and port.
"""

import os
import shutil
import sys
import subprocess
from pathlib import Path


def ensure_env_file() -> bool:
    """Create .env from env.example on first run; False means it needs editing."""
    env_file = Path(".env")
    if env_file.exists():
        return True

    if Path("env.example").exists():
        shutil.copyfile("env.example", env_file)
        print("Created .env from env.example. Fill in your Firebase and Cloudinary credentials.")
    else:
        print("No .env file found. Please create one with your configuration.")
    return False


def main():
    if not ensure_env_file():
        sys.exit(1)

    os.environ.setdefault("ENVIRONMENT", "development")

    # Settings read .env at import time
    from app.config import settings

    if not Path(settings.firebase_service_account_path).exists():
        print(f"Firebase service account not found at {settings.firebase_service_account_path}.")
        sys.exit(1)

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "app.main:app",
            "--host", settings.host,
            "--port", str(settings.port),
            "--log-level", settings.log_level.lower(),
            "--reload"
        ])
    except KeyboardInterrupt:
        print("\nShutting down development server...")


if __name__ == "__main__":
    main()
