import logging
import sys
import time
import uuid
from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional

import click
import uvicorn
from alembic import command
from alembic.config import Config
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from slowapi.middleware import SlowAPIMiddleware
from sqlalchemy.exc import SQLAlchemyError

from talentshine.core.config import settings
from talentshine.core.database import Database
from talentshine.core.exceptions import AppException
from talentshine.core.init import initialize_application, seed_courses
from talentshine.core.limiter import custom_rate_limit_exceeded_handler, limiter
from talentshine.routers import routes

# ============================================================================
# Directory Setup
# ============================================================================
BASE_DIR = Path(__file__).parent
LOG_FILE = BASE_DIR / settings.log_file
LOG_FILE.parent.mkdir(parents=True, exist_ok=True)


# ============================================================================
# Logging Configuration
# ============================================================================
def setup_logging():
    """Configure logging for the application."""
    log_level = logging.DEBUG if settings.debug else logging.INFO
    log_format = "%(asctime)s - %(levelname)s - [%(name)s:%(lineno)d] %(message)s"

    handlers = [
        logging.StreamHandler(sys.stdout),
        logging.FileHandler(
            LOG_FILE,
            mode="a",
            encoding="utf-8",
        ),
    ]

    logging.basicConfig(
        level=log_level,
        format=log_format,
        handlers=handlers,
        force=True,  # Override any existing configuration
    )

    # Suppress verbose third-party logs
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)

    return logging.getLogger(__name__)


logger = setup_logging()


# ============================================================================
# Application Lifespan
# ============================================================================
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application startup and shutdown."""
    logger.info("=" * 80)
    logger.info("Starting application...")
    logger.info("=" * 80)

    database: Database = app.state.database

    # Startup
    try:
        logger.info("Initializing database...")
        database.connect()
        database.create_all()
        logger.info("Database tables ready")

        with database.session() as db:
            initialize_application(db)

        logger.info("Application startup completed successfully")

    except Exception as e:
        logger.error(f"Failed during startup: {e}", exc_info=True)
        database.dispose()
        raise

    yield  # Application is running

    # Shutdown
    logger.info("=" * 80)
    logger.info("Shutting down application...")
    logger.info("=" * 80)
    database.dispose()
    logger.info("Application shutdown completed")


# ============================================================================
# Exception Handlers
# ============================================================================
async def app_exception_handler(request: Request, exc: AppException):
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.message}")
    else:
        logger.info(
            f"{request.method} {request.url.path} -> {exc.status_code}: {exc.message}"
        )
    return JSONResponse(status_code=exc.status_code, content=exc.to_content())


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    logger.warning(f"Validation error: {exc.errors()}")
    # Serialize errors to make them JSON serializable
    details = []
    for error in exc.errors():
        details.append(
            {
                "loc": [str(part) for part in error.get("loc", ())],
                "msg": str(error.get("msg", "")),
                "type": str(error.get("type", "")),
            }
        )
    return JSONResponse(
        status_code=400,
        content={"message": "Validation error", "details": details},
    )


async def sqlalchemy_exception_handler(request: Request, exc: SQLAlchemyError):
    logger.error(f"SQLAlchemy error: {type(exc).__name__}", exc_info=exc)
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error"},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(
        f"Unhandled error on {request.method} {request.url.path}", exc_info=exc
    )
    return JSONResponse(
        status_code=500,
        content={"message": "Internal Server Error"},
    )


# ============================================================================
# FastAPI Application
# ============================================================================
def create_app(database: Optional[Database] = None) -> FastAPI:
    """Build the application around ``database`` (one built from settings by default)."""
    if database is None:
        database = Database(
            settings.sqlalchemy_url, echo=settings.debug, timezone=settings.timezone
        )

    app = FastAPI(
        title=settings.app_name,
        description=settings.app_description,
        version=settings.app_version,
        docs_url="/docs" if settings.debug else None,
        redoc_url="/redoc" if settings.debug else None,
        openapi_url="/openapi.json" if settings.debug else None,
        debug=settings.debug,
        lifespan=lifespan,
    )
    app.state.database = database
    app.state.limiter = limiter

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Applies RATE_LIMIT_DEFAULT to routes without their own limit
    app.add_middleware(SlowAPIMiddleware)

    @app.middleware("http")
    async def tag_response(request: Request, call_next):
        """Echo or assign X-Request-ID and report the handling time."""
        request_id = request.headers.get("X-Request-ID") or uuid.uuid4().hex
        started = time.perf_counter()
        response = await call_next(request)
        response.headers["X-Process-Time"] = f"{time.perf_counter() - started:.4f}"
        response.headers["X-Request-ID"] = request_id
        return response

    app.add_exception_handler(AppException, app_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, sqlalchemy_exception_handler)
    app.add_exception_handler(RateLimitExceeded, custom_rate_limit_exceeded_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # ========================================================================
    # Health Check Endpoints
    # ========================================================================
    @app.get("/")
    async def root():
        """Root endpoint"""
        return {"message": settings.welcome_message}

    @app.get("/health")
    @limiter.limit("10/minute")
    def health_check(request: Request):
        """Detailed health check endpoint."""
        db_status = "healthy" if request.app.state.database.ping() else "unhealthy"
        return {
            "status": "healthy" if db_status == "healthy" else "degraded",
            "timestamp": time.time(),
            "environment": "production" if settings.production else "development",
            "database": db_status,
        }

    # Include application routers
    for router in routes:
        app.include_router(router)

    logger.info(f"Registered {len(routes)} routers")
    return app


app = create_app()


# ============================================================================
# CLI Commands
# ============================================================================
@click.group()
def cli():
    """Talent Shine server management CLI."""
    pass


def run_migrations():
    alembic_cfg = Config(str(BASE_DIR / "alembic.ini"))
    alembic_cfg.set_main_option("script_location", str(BASE_DIR / "migrations"))
    command.upgrade(alembic_cfg, "head")
    logger.info("Migrations completed successfully")


@cli.command()
def migrate():
    """Apply database migrations."""
    try:
        run_migrations()
    except Exception as e:
        logger.error(f"Migration failed: {e}", exc_info=True)
        raise click.ClickException(f"Migration failed: {e}")


@cli.command("seed-courses")
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def seed_courses_command(path: str):
    """Load courses from a JSON file."""
    database = Database(settings.sqlalchemy_url, timezone=settings.timezone)
    database.connect()
    try:
        with database.session() as db:
            created = seed_courses(db, path)
    except ValueError as e:
        raise click.ClickException(str(e))
    finally:
        database.dispose()
    click.echo(f"Created {created} course(s)")


@cli.command()
@click.option("--host", default="127.0.0.1", help="Host to bind the server to")
@click.option("--port", default=settings.port, help="Port to run the server on")
@click.option("--reload", is_flag=True, help="Enable auto-reload (development only)")
def dev(host: str, port: int, reload: bool):
    """Run development server with Uvicorn."""
    logger.info("Starting development server...")
    logger.info(f"  - Host: {host}")
    logger.info(f"  - Port: {port}")
    logger.info(f"  - Reload: {reload}")

    uvicorn.run(
        "main:app",
        host=host,
        port=port,
        reload=reload,
        log_level="debug",
        access_log=True,
    )


@cli.command()
@click.option("--host", default=settings.host, help="Host to bind the server to")
@click.option("--port", default=settings.port, help="Port to run the server on")
@click.option("--workers", default=4, help="Number of worker processes")
def prod(host: str, port: int, workers: int):
    """Run production server with Gunicorn."""

    # 1. RUN MIGRATIONS FIRST
    logger.info("Running database migrations...")
    try:
        run_migrations()
    except Exception as e:
        logger.error(f"Migration failed: {e}", exc_info=True)
        raise click.ClickException(f"Migration failed: {e}")

    logger.info("Starting production server with Gunicorn...")
    logger.info(f"  - Host: {host}")
    logger.info(f"  - Port: {port}")
    logger.info(f"  - Workers: {workers}")

    import subprocess

    cmd = [
        "gunicorn",
        "main:app",
        "--worker-class",
        "uvicorn.workers.UvicornWorker",
        "--workers",
        str(workers),
        "--bind",
        f"{host}:{port}",
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]

    try:
        # 2. START SERVER (This blocks until the app stops)
        subprocess.run(cmd, check=True)
    except subprocess.CalledProcessError as e:
        logger.error(f"Gunicorn failed to start: {e}")
        raise click.ClickException(str(e))
    except FileNotFoundError:
        logger.error("Gunicorn not found. Install it with: pip install gunicorn")
        raise click.ClickException("Gunicorn not installed")


@cli.command()
def info():
    """Display application information."""
    click.echo(f"Application: {settings.app_name}")
    click.echo(f"Version: {settings.app_version}")
    click.echo(f"Debug Mode: {settings.debug}")
    click.echo(f"Port: {settings.port}")
    click.echo(f"CORS Origins: {', '.join(settings.cors_allowed_origins)}")
    click.echo(f"Log File: {LOG_FILE.absolute()}")


if __name__ == "__main__":
    cli()
