# backend/travel_ai/models/chat_models.py

from pydantic import BaseModel, Field
from typing import Any, Dict, List, Optional


# -------------------------
# Outbound
# -------------------------
class ChatMessage(BaseModel):
    role: str                 # system | user | assistant
    content: Any = None       # plain string, or any JSON value on the way back


class JsonSchemaFormat(BaseModel):
    name: str
    schema_: Dict[str, Any] = Field(alias="schema")
    strict: bool = True

    model_config = {"populate_by_name": True}

    def to_response_format(self) -> Dict[str, Any]:
        return {
            "type": "json_schema",
            "json_schema": {
                "name": self.name,
                "schema": self.schema_,
                "strict": self.strict,
            },
        }


class ChatRequest(BaseModel):
    messages: List[ChatMessage]
    model: str
    temperature: float
    max_tokens: int
    json_schema: Optional[JsonSchemaFormat] = None


# -------------------------
# Inbound
# -------------------------
class ChatChoice(BaseModel):
    index: int = 0
    message: ChatMessage
    finish_reason: Optional[str] = None


class ChatResponse(BaseModel):
    choices: List[ChatChoice] = Field(default_factory=list)
    model: Optional[str] = None
