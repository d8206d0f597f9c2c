# app/main.py

import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import get_settings
from app.database import init_db
import app.exceptions as ex
from app.router import router as products_router

from app.logger import configure_logging, get_logger
configure_logging()

log = get_logger(__name__)
log.info("FastAPI application is starting...")

settings = get_settings()


@asynccontextmanager
async def lifespan(app: FastAPI):
  # Application startup
  init_db()
  yield


app = FastAPI(title="REST API FastAPI / SQLModel",
              lifespan=lifespan,
              description="API Docs for Products",
              version="1.0.0",
              openapi_tags=[{"name": "Products", "description": "API operations related to products"}],
              swagger_ui_parameters={"defaultModelsExpandDepth": -1})

# Only whitelisted frontends may call the API from a browser
app.add_middleware(
  CORSMiddleware,
  allow_origins=settings.cors_origins,
  allow_methods=["*"],
  allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
  start = time.perf_counter()
  response = await call_next(request)
  duration_ms = round((time.perf_counter() - start) * 1000, 2)
  log.info(
    f"{request.method} {request.url.path} {response.status_code} - {duration_ms} ms",
    extra={
      "method": request.method,
      "path": request.url.path,
      "status_code": response.status_code,
      "duration_ms": duration_ms,
      "client": request.client.host if request.client else None,
    },
  )
  return response


app.include_router(products_router)


@app.get("/health")
def healthcheck():
  return {"status": "ok"}


@app.exception_handler(ex.RequestValidationFailed)
async def validation_exception_handler(request: Request, exc: ex.RequestValidationFailed):
  return JSONResponse(status_code=400, content={"errors": exc.errors})


@app.exception_handler(ex.ProductNotFoundError)
async def not_found_exception_handler(request: Request, exc: ex.ProductNotFoundError):
  return JSONResponse(status_code=404, content={"error": exc.message})


@app.exception_handler(ex.RepositoryError)
async def repository_exception_handler(request: Request, exc: ex.RepositoryError):
  log.error(f"[API] {request.method} {request.url.path} storage failure: {exc.message}", exc_info=exc)
  return JSONResponse(status_code=500, content={"error": ex.INTERNAL_ERROR_MESSAGE})


@app.exception_handler(Exception)
async def global_exception_handler(request: Request, exc: Exception):
  log.error(f"Global Exception Unhandled Exception: {exc}", exc_info=exc)
  return JSONResponse(
    status_code=500,
    content={"error": ex.INTERNAL_ERROR_MESSAGE},
  )
