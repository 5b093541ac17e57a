"""
ASGI entry point for LinkSnatcher.

Run with ``uvicorn wsgi:application`` or ``python wsgi.py``.
"""
from linksnatcher.main import app

application = app

if __name__ == "__main__":
    import uvicorn
    uvicorn.run(application, host="0.0.0.0", port=8000)
