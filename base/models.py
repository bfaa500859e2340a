"""
Wire models for the food info endpoint.

Inbound JSON-RPC envelopes, the USDA FoodData Central search payload, and the
normalized nutrition summary the agent hands back. Field names follow the
camelCase wire format through aliases.
"""

from typing import Annotated, Any, Awaitable, Callable, List, Literal, Optional, Union

from pydantic import BaseModel, ConfigDict, Discriminator, Field, Tag, field_validator


class WireModel(BaseModel):
    """Base model accepting both the camelCase alias and the field name."""
    model_config = ConfigDict(populate_by_name=True)


# --- Message parts -------------------------------------------------------

class InboundTextPart(WireModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    kind: Literal["text"] = "text"
    text: str = ""


class InboundDataPart(WireModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    kind: Literal["data"] = "data"
    data: Any = None


class InboundOtherPart(WireModel):
    """Any part kind the endpoint does not understand (file parts included)."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    kind: Optional[str] = None


def _part_tag(value: Any) -> str:
    kind = value.get("kind") if isinstance(value, dict) else getattr(value, "kind", None)
    return kind if kind in ("text", "data") else "other"


InboundPart = Annotated[
    Union[
        Annotated[InboundTextPart, Tag("text")],
        Annotated[InboundDataPart, Tag("data")],
        Annotated[InboundOtherPart, Tag("other")],
    ],
    Discriminator(_part_tag),
]


class InboundMessage(WireModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    role: str
    parts: List[InboundPart] = Field(default_factory=list)
    message_id: Optional[str] = Field(default=None, alias="messageId")
    task_id: Optional[str] = Field(default=None, alias="taskId")

    @field_validator("parts", mode="before")
    @classmethod
    def _none_as_no_parts(cls, value):
        return [] if value is None else value

    def dump_parts(self) -> List[dict]:
        """Return the parts exactly as they arrived on the wire."""
        return [part.model_dump(by_alias=True, exclude_unset=True) for part in self.parts]


# --- Envelope ------------------------------------------------------------

class InboundParams(WireModel):
    message: Optional[InboundMessage] = None
    messages: Optional[List[InboundMessage]] = None
    context_id: Optional[str] = Field(default=None, alias="contextId")
    task_id: Optional[str] = Field(default=None, alias="taskId")

    def message_list(self) -> List[InboundMessage]:
        """A single `message` wins over `messages`; neither means no messages."""
        if self.message is not None:
            return [self.message]
        if self.messages:
            return list(self.messages)
        return []


class InboundEnvelope(WireModel):
    jsonrpc: str
    id: Union[str, int]
    method: Optional[str] = None
    params: Optional[InboundParams] = None


# --- USDA FoodData Central -------------------------------------------------

class NutrientRecord(WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    nutrient_name: str = Field(default="", alias="nutrientName")
    value: float = 0
    unit_name: str = Field(default="", alias="unitName")

    @field_validator("nutrient_name", "unit_name", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return "" if value is None else value

    @field_validator("value", mode="before")
    @classmethod
    def _none_as_zero(cls, value):
        return 0 if value is None else value


class FoodItem(WireModel):
    description: str = ""
    fdc_id: Optional[int] = Field(default=None, alias="fdcId")
    food_nutrients: List[NutrientRecord] = Field(default_factory=list, alias="foodNutrients")

    @field_validator("food_nutrients", mode="before")
    @classmethod
    def _none_as_no_nutrients(cls, value):
        return [] if value is None else value


class SearchResponse(WireModel):
    foods: List[FoodItem] = Field(default_factory=list)

    @field_validator("foods", mode="before")
    @classmethod
    def _none_as_no_foods(cls, value):
        return [] if value is None else value


# --- Agent side ------------------------------------------------------------

class NutritionSummary(WireModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    food_name: str = Field(alias="foodName")
    calories: Union[int, float] = 0
    protein: str
    fat: str
    carbs: str
    vitamins: Optional[List[str]] = None
    minerals: Optional[List[str]] = None
    health_benefits: List[str] = Field(alias="healthBenefits", min_length=1)

    def to_wire(self) -> dict:
        """camelCase dict with absent vitamin/mineral lists left out."""
        return self.model_dump(by_alias=True, exclude_none=True)


class AgentResponse(BaseModel):
    """What an agent's generate() returns; `text` carries the summary."""
    model_config = ConfigDict(arbitrary_types_allowed=True)

    text: Any = None


FetchCapability = Callable[[], Awaitable[NutritionSummary]]
