"""Client factory."""

import logging
from typing import Tuple

from admin_console.core.config import Settings
from admin_console.core.context import ApiContext
from admin_console.services.demo.memory_backend import InMemoryAdminBackend
from admin_console.services.mutation.base import MutationClient
from admin_console.services.mutation.http_mutation_service import HttpMutationClient
from admin_console.services.resource.base import ResourceClient
from admin_console.services.resource.http_resource_service import HttpResourceClient

logger = logging.getLogger(__name__)


class ClientFactory:
    """The factory for the resource and mutation clients."""

    @staticmethod
    def create_clients(settings: Settings) -> Tuple[ResourceClient, MutationClient]:
        """Create the resource and mutation clients for the configured provider."""
        provider = settings.client_provider
        logger.info(f"Creating admin API clients for provider: {provider}")

        if provider == "memory":
            backend = InMemoryAdminBackend()
            return backend, backend
        elif provider == "http":
            context = ApiContext.from_settings(settings)
            # The resource client owns the connection pool both clients use
            resource_client = HttpResourceClient(context)
            return resource_client, HttpMutationClient(context, client=resource_client.client)
        else:
            raise ValueError(f"No client provider found for type: {provider}")
