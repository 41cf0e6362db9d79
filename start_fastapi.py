#!/usr/bin/env python3
"""
Development startup script for the dashboard backend
"""
import os
import subprocess


def main():
    # Run from the repository root so ``dashboard`` imports as a package
    # and the ``public`` directory and ``.env`` file are found.
    os.chdir(os.path.dirname(os.path.abspath(__file__)))

    os.environ.setdefault('ENVIRONMENT', 'development')
    port = os.environ.setdefault('PORT', '3000')

    # Start FastAPI with hot reload
    subprocess.run([
        'uvicorn',
        'dashboard.main:app',
        '--host', '0.0.0.0',
        '--port', port,
        '--reload'
    ])

if __name__ == "__main__":
    main()
