"""
SIREN Incident Service - Root Entry Point.

All application logic lives in src/siren.

For development or production (per ENVIRONMENT): python main.py
For production: uvicorn main:app
"""

from siren.main import get_application, main

# App instance for ASGI servers (uvicorn, gunicorn)
app = get_application()

if __name__ == "__main__":
    main()
