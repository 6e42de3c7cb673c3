from fastapi import FastAPI

from .prompts import router as prompts_router

def register_routes(app: FastAPI):
    app.include_router(prompts_router, prefix="/v1")
