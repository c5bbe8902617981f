"""
``python -m app`` — serve on HOST:PORT (0.0.0.0 so phones on the LAN can reach it).
"""
import uvicorn

from app.config import settings

if __name__ == "__main__":
    uvicorn.run("app.main:app", host=settings.HOST, port=settings.PORT)
