class VinylError(Exception):
	"""Base class for groove extraction failures."""


class SpiralNotFoundError(VinylError):
	def __init__(self, message: str = 'Cannot find the start of a spiral!'):
		super().__init__(message)


class NotTrackedError(VinylError):
	def __init__(self, message: str = 'No saved extraction track presents. Try extracting with track=True'):
		super().__init__(message)
