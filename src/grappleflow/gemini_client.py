"""Gemini API client for generating coach replies."""

from typing import Any, Optional

from google import genai
from google.genai import errors as genai_errors
from google.genai import types as genai_types

DEFAULT_MODEL = "gemini-2.5-flash"


class GeminiAPIError(Exception):
    """Raised when the Gemini API returns an error or an unusable response."""


class GeminiClient:
    """Client for the Gemini generateContent endpoint."""

    def __init__(
        self,
        api_key: str,
        model: str = DEFAULT_MODEL,
        client: Optional[genai.Client] = None,
    ):
        """
        Initialize the Gemini API client.

        The underlying genai.Client is created on the first request, so
        commands that never talk to Coach G open no connections.

        Args:
            api_key: API key for the Gemini API
            model: Model name to call
            client: Optional prebuilt genai.Client (used to stub the API in tests)
        """
        self.api_key = api_key
        self.model = model
        self._client = client

    @property
    def client(self) -> genai.Client:
        if self._client is None:
            self._client = genai.Client(api_key=self.api_key)
        return self._client

    async def generate_content(
        self,
        prompt: str,
        system_instruction: Optional[str] = None,
        response_schema: Optional[dict[str, Any]] = None,
    ) -> str:
        """
        Send a single-turn prompt and return the reply text.

        Args:
            prompt: User prompt
            system_instruction: Optional persona/system instruction
            response_schema: Optional JSON schema; when given the model is asked
                for an application/json response matching it

        Returns:
            The concatenated text of the first candidate ("" if it has none)

        Raises:
            GeminiAPIError: If the API rejects the request
        """
        contents = [
            genai_types.Content(role="user", parts=[genai_types.Part(text=prompt)]),
        ]
        config = genai_types.GenerateContentConfig(
            system_instruction=system_instruction,
            response_mime_type="application/json" if response_schema is not None else None,
            response_schema=response_schema,
        )

        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=contents,
                config=config,
            )
        except genai_errors.APIError as e:
            raise GeminiAPIError(f"Error {e.code}: {e.message}") from e
        return self._extract_text(response)

    def _extract_text(self, response: Any) -> str:
        """Pull the reply text out of a generateContent response."""
        if not response.candidates:
            return ""
        content = response.candidates[0].content
        if content is None or not content.parts:
            return ""
        return "".join(part.text or "" for part in content.parts)

    async def close(self) -> None:
        """Close the HTTP client, if one was opened."""
        if self._client is not None:
            await self._client.aio.aclose()
