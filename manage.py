#!/usr/bin/env python
"""Django's command-line utility for administrative tasks."""

import os
import sys
from pathlib import Path

from dotenv import load_dotenv

# .env must be loaded before settings read the environment
load_dotenv(Path(__file__).resolve().parent / ".env")

from django.core.management import execute_from_command_line


def main() -> None:
    """Run administrative tasks with settings for ENVIRONMENT (default development)."""
    environment = os.environ.get("ENVIRONMENT", "development")
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", f"core.settings.{environment}")
    execute_from_command_line(sys.argv)


if __name__ == "__main__":
    main()
