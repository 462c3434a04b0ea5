"""Embedding backends, including a client for a local Ollama server."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

import requests

DEFAULT_OLLAMA_URL = "http://localhost:11434"
DEFAULT_MODEL = "nomic-embed-text"
_TIMEOUT = 30


class BackendError(Exception):
    """Raised when an embedding backend cannot do its work."""


class EmbeddingBackend(ABC):
    """Something that turns texts into embedding vectors."""

    @abstractmethod
    def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """Return one embedding vector per text, in order."""


def _model_names(data: Any) -> list[str]:
    models = data["models"]
    if not isinstance(models, list):
        raise TypeError("models is not a list")
    names = [model["name"] for model in models]
    if not all(isinstance(name, str) for name in names):
        raise TypeError("model name is not a string")
    return names


def _embedding(data: Any) -> list[float]:
    vector = data["embedding"]
    if not isinstance(vector, list) or not all(
        isinstance(x, (int, float)) and not isinstance(x, bool) for x in vector
    ):
        raise TypeError("embedding is not a list of numbers")
    return [float(x) for x in vector]


class OllamaBackend(EmbeddingBackend):
    """Embedding backend talking to an Ollama server over HTTP."""

    def __init__(
        self,
        base_url: str = DEFAULT_OLLAMA_URL,
        model: str = DEFAULT_MODEL,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.session = session or requests.Session()

    def with_model(self, model: str) -> OllamaBackend:
        """Return a backend like this one that uses ``model``."""
        return OllamaBackend(self.base_url, model, self.session)

    def check_available(self) -> None:
        """Raise :class:`BackendError` unless the server runs and has the model."""
        try:
            response = self.session.get(f"{self.base_url}/api/tags", timeout=_TIMEOUT)
        except requests.RequestException as exc:
            raise BackendError(
                "Failed to connect to Ollama. Is it running? Start with: ollama serve"
            ) from exc

        if not response.ok:
            raise BackendError("Ollama is running but returned error status")

        try:
            names = _model_names(response.json())
        except (ValueError, KeyError, TypeError) as exc:
            raise BackendError("Failed to parse Ollama models response") from exc

        if not any(name.startswith(self.model) for name in names):
            raise BackendError(
                f"Model '{self.model}' not found. Pull it with: ollama pull {self.model}"
            )

    def embed(self, texts: Sequence[str]) -> list[list[float]]:
        """Request an embedding for each text, one request per text."""
        url = f"{self.base_url}/api/embeddings"
        embeddings = []
        for text in texts:
            try:
                response = self.session.post(
                    url, json={"model": self.model, "prompt": text}, timeout=_TIMEOUT
                )
            except requests.RequestException as exc:
                raise BackendError("Failed to send embedding request to Ollama") from exc

            if not response.ok:
                raise BackendError(
                    "Ollama embedding request failed: "
                    f"{response.status_code} {response.reason or ''}".rstrip()
                )

            try:
                embeddings.append(_embedding(response.json()))
            except (ValueError, KeyError, TypeError) as exc:
                raise BackendError("Failed to parse Ollama embedding response") from exc
        return embeddings