from abc import ABC, abstractmethod
from typing import Any, Sequence

from screener.services.file_encoder import EncodedFile


class AbstractLLMClient(ABC):
	"""Interface for models that read attached files and answer in JSON."""

	model: str
	# Extensions the provider cannot read; the route drops these with a warning.
	unreadable_extensions: frozenset[str] = frozenset()

	@abstractmethod
	async def generate_structured(
		self,
		prompt: str,
		*,
		parts: Sequence[EncodedFile] = (),
		schema: dict[str, Any] | None = None,
		temperature: float = 0.2,
	) -> str:
		"""Send one request and return the model's raw text answer.

		Args:
			prompt: Instruction text sent ahead of the attachments.
			parts: Inline files, in the order they should be presented.
			schema: JSON schema the answer must follow.
			temperature: Decoding temperature.

		Returns:
			str: Raw response text (expected to be JSON; not parsed here).

		Raises:
			LLMAppError: If the provider call fails.
		"""
		...
