"""
System endpoints exposing the state of the singleton managers.
"""

from fastapi import APIRouter, Depends
from payment_system.core.dependencies import (
    get_config_manager,
    get_service_manager,
    get_settings
)
from payment_system.core.config_manager import ConfigManager
from payment_system.core.service_manager import ServiceManager

router = APIRouter(
    prefix="/system",
    tags=["System Management"],
    responses={404: {"description": "Not found"}},
)


@router.get("/status")
def get_system_status(
    service_mgr: ServiceManager = Depends(get_service_manager),
    config_mgr: ConfigManager = Depends(get_config_manager)
):
    """Get system status from the singleton managers."""
    return {
        "application_status": service_mgr.get_application_status(),
        "config_info": {
            "debug_mode": config_mgr.is_debug_mode(),
        },
        "available_services": service_mgr.list_services()
    }


@router.get("/config/settings")
def get_config_settings(
    settings = Depends(get_settings)
):
    """Get application configuration settings (safe subset)."""
    return {
        "server": {
            "app_name": settings.app_name,
            "version": settings.version,
            "debug": settings.debug,
            "log_level": settings.log_level,
        }
    }


@router.post("/config/reload")
def reload_configuration(
    config_mgr: ConfigManager = Depends(get_config_manager)
):
    """Reload application configuration without restarting."""
    try:
        config_mgr.reload_settings()
        return {
            "success": True,
            "message": "Configuration reloaded successfully",
            "debug_mode": config_mgr.is_debug_mode()
        }
    except Exception as e:
        return {
            "success": False,
            "message": f"Failed to reload configuration: {str(e)}"
        }
