"""OpenAI relevance analysis of SECOP processes.

Sends fetched records to the Chat Completions API with a fixed business
profile and parses the free-text reply as JSON. No schema is enforced on the
reply; failures are returned as error markers instead of being raised.
"""

import json
import logging
import re
from typing import Any, Optional

from openai import AsyncOpenAI, OpenAIError

logger = logging.getLogger(__name__)

# Error markers embedded in the analysis result
COMMUNICATION_ERROR = "communication error"
INVALID_JSON = "invalid JSON from model"
NO_CONTENT = "no content"

NO_MATCH_MESSAGE = "Hoy no he encontrado procesos que te puedan interesar en el SECOP"

SYSTEM_PROMPT = f"""Eres un experto en contratación estatal en Colombia con conocimiento actualizado
sobre los tipos de procesos y requisitos legales. A continuación recibirás una respuesta
en formato JSON que contiene información sobre procesos de contratación extraídos del SECOP.

Evalúa cada proceso y dinos cuáles son relevantes para la empresa Double C Designs,
especializada en diseño de edificaciones e infraestructura.
Por favor, solo es diseño, no es construcción.

Responde en formato de JSON indicando el ID del proceso (si está disponible), seguido de
la descripción, la url, el precio, la entidad y la justificación. Si no hay ningún proceso
de interés responde:

"{NO_MATCH_MESSAGE}"

No incluyas la respuesta en bloques de código (sin ```json ni ```)."""

_LEADING_FENCE = re.compile(r"^```(?:json)?[ \t]*\n?", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\n?```$")


def strip_code_fence(text: str) -> str:
    """Remove one leading and one trailing Markdown code fence, if present."""
    text = text.strip()
    text = _LEADING_FENCE.sub("", text, count=1)
    text = _TRAILING_FENCE.sub("", text, count=1)
    return text.strip()


def _reject_constant(name: str):
    # NaN and Infinity are not JSON, but json.loads accepts them by default
    raise ValueError(f"non-standard JSON constant: {name}")


def parse_model_reply(content: Optional[str]) -> Any:
    """Turn the model's text reply into an analysis result.

    Returns:
        The parsed JSON value, or an error marker dict when the reply is
        empty or not valid JSON after fence stripping.
    """
    if not content or not content.strip():
        return {"error": NO_CONTENT}

    cleaned = strip_code_fence(content)
    try:
        return json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning("Model reply is not valid JSON: %s", e)
        return {"error": INVALID_JSON, "raw": cleaned}


class RelevanceAnalyzer:
    """Scores SECOP records for relevance with a single chat completion."""

    def __init__(self, client: AsyncOpenAI, model: str = "gpt-4o", temperature: float = 0.0):
        self.client = client
        self.model = model
        self.temperature = temperature

    async def analyze(self, records: list[dict[str, Any]]) -> Any:
        """Ask the model which records are relevant.

        Args:
            records: Contract records as returned by the open-data API.

        Returns:
            Parsed model output, or one of the error markers.
        """
        payload = json.dumps(records, indent=2, ensure_ascii=False)

        try:
            response = await self.client.chat.completions.create(
                model=self.model,
                temperature=self.temperature,
                messages=[
                    {"role": "system", "content": SYSTEM_PROMPT},
                    {"role": "user", "content": payload},
                ],
            )
        except OpenAIError as e:
            logger.error("Error communicating with OpenAI: %s", e)
            return {"error": COMMUNICATION_ERROR, "detail": str(e)}

        if not response.choices or response.choices[0].message is None:
            return {"error": NO_CONTENT}

        return parse_model_reply(response.choices[0].message.content)
