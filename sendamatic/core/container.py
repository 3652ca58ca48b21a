from dependency_injector import containers, providers

from sendamatic.client.client import SendamaticClient
from sendamatic.core.config import SendamaticSettings


class SendamaticContainer(containers.DeclarativeContainer):
	"""Dependency injection container"""
	
	# Built on first use, so importing this module never reads the environment.
	settings = providers.Singleton(SendamaticSettings)
	
	sendamatic_client = providers.Singleton(
		SendamaticClient.from_settings,
		settings=settings,
	)


sendamatic_container = SendamaticContainer()

def get_sendamatic_client() -> SendamaticClient:
	# resolves on every call, so test overrides still work
	return sendamatic_container.sendamatic_client()
