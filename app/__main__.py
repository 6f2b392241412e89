import uvicorn

from app.app import CONFIG


if __name__ == "__main__":
    uvicorn.run("app.app:app", host=CONFIG.host, port=CONFIG.port)
