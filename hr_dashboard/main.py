"""
Main FastAPI Application
Entry point for the HR Dashboard API.
"""
from typing import Optional
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from hr_dashboard.config.logging_config import get_logger, setup_logging
from hr_dashboard.config.settings import Settings, load_settings
from hr_dashboard.controllers.dashboard_controller import router as dashboard_router
from hr_dashboard.controllers.employee_controller import router as employee_router
from hr_dashboard.repositories.employee_repository import EmployeeRepository, ensure_employee_db
from hr_dashboard.services.employee_service import EmployeeService

logger = get_logger(__name__)

VERSION = "1.0.0"


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API around an explicit Settings object."""
    settings = settings or load_settings()
    setup_logging(settings.log_level)

    ensure_employee_db(
        settings.db_path,
        csv_path=settings.csv_path if settings.seed_from_csv else None,
        create_if_missing=settings.env == "dev",
    )
    repository = EmployeeRepository(
        settings.db_path,
        id_prefix=settings.employee_id_prefix,
        id_width=settings.employee_id_width,
    )

    app = FastAPI(
        title="HR Dashboard API",
        description="Employee management and dashboard statistics",
        version=VERSION,
    )
    app.state.employee_service = EmployeeService(repository, settings)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization", "X-Requested-With"],
    )

    # Include routers
    app.include_router(employee_router)
    app.include_router(dashboard_router)

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {"message": "HR Dashboard API", "version": VERSION}

    @app.get("/health")
    async def health():
        """Health check endpoint."""
        return {"status": "healthy"}

    logger.info("HR Dashboard API ready (env=%s, db=%s)", settings.env, settings.db_path)
    return app
