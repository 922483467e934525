# Application entry point
# Re-exports the app in the masterdata package so `uvicorn main:app` works
# from the repository root; `python main.py` serves on SERVER_PORT.

from masterdata.main import app

if __name__ == "__main__":
    import uvicorn
    from masterdata.core.config import settings

    uvicorn.run(app, host="0.0.0.0", port=settings.SERVER_PORT)
