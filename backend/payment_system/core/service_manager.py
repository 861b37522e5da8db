from typing import Dict, Any, Optional
import logging
from payment_system.core.patterns.singleton import Singleton
from payment_system.core.config_manager import config_manager
from payment_system.core.payment_manager import payment_manager
from payment_system.payments.strategies import PAYMENT_METHODS


class ServiceManager(Singleton):
    """
    Singleton Service Manager.

    Central registry of the application's managers, so routes and scripts
    can look them up by name and report on their state.
    """

    def _setup(self):
        """Initialize the service manager."""
        self._services: Dict[str, Any] = {}
        self._logger = logging.getLogger(__name__)
        self._register_core_services()

    def _register_core_services(self):
        """Register core application services."""
        self.register_service("config", config_manager)
        self.register_service("payments", payment_manager)
        self._logger.info("Core services registered successfully")

    def start(self):
        """Register the core services again if a shutdown emptied the registry."""
        if not self._services:
            self._logger.info("Starting services...")
            self._register_core_services()

    def register_service(self, name: str, service: Any):
        """
        Register a service with the service manager.

        Args:
            name: The name to register the service under
            service: The service instance to register
        """
        self._services[name] = service
        self._logger.debug(f"Service '{name}' registered")

    def get_service(self, name: str) -> Optional[Any]:
        """
        Get a registered service by name.

        Returns:
            The service instance, or None if not found
        """
        return self._services.get(name)

    def has_service(self, name: str) -> bool:
        return name in self._services

    def unregister_service(self, name: str) -> bool:
        """
        Unregister a service.

        Returns:
            True if the service was unregistered, False if it wasn't found
        """
        if name in self._services:
            del self._services[name]
            self._logger.debug(f"Service '{name}' unregistered")
            return True
        return False

    def list_services(self) -> list:
        return list(self._services.keys())

    def get_config_manager(self):
        """Get the configuration manager."""
        return self.get_service("config")

    def get_payment_manager(self):
        """Get the payment manager."""
        return self.get_service("payments")

    def get_application_status(self) -> dict:
        """
        Get the overall application status.

        Returns:
            Dictionary containing status information for all services
        """
        config_mgr = self.get_config_manager()
        payment_mgr = self.get_payment_manager()

        return {
            "services_registered": len(self._services),
            "service_names": self.list_services(),
            "config_status": {
                "debug_mode": config_mgr.is_debug_mode() if config_mgr else None,
            },
            "payment_status": {
                "initialized": payment_mgr is not None,
                "supported_methods": sorted(PAYMENT_METHODS),
            },
            "application_healthy": config_mgr is not None and payment_mgr is not None,
        }

    def shutdown(self):
        """Shutdown all services gracefully."""
        self._logger.info("Shutting down all services...")
        self._services.clear()
        self._logger.info("All services shut down successfully")


# Create the global service manager instance
service_manager = ServiceManager.get_instance()
