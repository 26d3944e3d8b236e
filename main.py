from contextlib import asynccontextmanager
from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from apis import pages, menu
from apis.views import BASE_DIR
from database import create_client
from settings import settings, logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Own the MongoDB client for the lifetime of the application."""
    app.state.mongo_client = create_client(settings)
    yield
    await app.state.mongo_client.close()
    logger.info("MongoDB client closed")


app = FastAPI(
    title="Menu Site",
    version="1.0.0",
    lifespan=lifespan
)

app.include_router(pages.router)
app.include_router(menu.router)


@app.get("/health")
async def root():
    """Health check."""
    return {"message": "Menu site is running"}


# Mounted last so the routes above take precedence
app.mount("/", StaticFiles(directory=BASE_DIR / "public"), name="public")


if __name__ == "__main__":
    import uvicorn

    logger.info(f"Listening at http://localhost:{settings.port}")
    uvicorn.run(app, host=settings.host, port=settings.port)
