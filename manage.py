#!/usr/bin/env python3
"""
shopledger management CLI.

Usage:
    python manage.py serve              Start the API server
    python manage.py report 2024-01     Monthly receipt
    python manage.py yearly 2024        Yearly summary

Run ``python manage.py --help`` for every command.
"""

from shopledger.cli import main

if __name__ == "__main__":
    main()
