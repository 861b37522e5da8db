from payment_system.routers import payments, system
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from payment_system.core.config_manager import config_manager
from payment_system.core.service_manager import service_manager
import logging

settings = config_manager.settings

# Configure logging
logging.basicConfig(
    level=config_manager.get_log_level(),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

app = FastAPI(
    title=f"{settings.app_name} API",
    description="Payment processing through interchangeable payment strategies behind a simple facade",
    version=settings.version,
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Include routers
app.include_router(payments.router)      # Payment endpoints
app.include_router(system.router)        # System management endpoints


# Health check endpoint
@app.get("/health", tags=["Health"])
def health_check():
    """API health check endpoint"""
    settings = config_manager.settings
    return {
        "success": True,
        "message": f"{settings.app_name} API is running successfully",
        "version": settings.version,
        "system_status": service_manager.get_application_status()
    }


# Application startup event
@app.on_event("startup")
async def startup_event():
    """Initialize application services on startup."""
    logger.info("Starting payment API application...")

    # Re-register services cleared by a previous shutdown
    service_manager.start()
    status = service_manager.get_application_status()

    if status["application_healthy"]:
        logger.info("All services initialized successfully")
    else:
        logger.error("Some services failed to initialize properly")
        logger.error(f"System status: {status}")


# Application shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """Clean up resources on application shutdown."""
    logger.info("Shutting down payment API application...")
    service_manager.shutdown()
    logger.info("Application shutdown complete")
