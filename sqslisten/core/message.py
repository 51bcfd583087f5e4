"""Request and message models for sqslisten."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_pascal


class ReceiveMessageRequest(BaseModel):
    """Immutable description of what to poll.

    Field names follow the SQS ReceiveMessage API in snake_case; the
    PascalCase API names are accepted as aliases.

    Attributes:
        queue_url: URL of the queue to poll. Must be non-empty.
        wait_time_seconds: Long-poll wait time. Also drives the poll interval.
        max_number_of_messages: Upper bound on messages per receive.
        visibility_timeout: Seconds received messages stay hidden.
        attribute_names: System attributes to return with each message.
        message_system_attribute_names: Same, newer API name.
        message_attribute_names: Custom message attributes to return.
        receive_request_attempt_id: Deduplication token for FIFO queues.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="forbid",
    )

    queue_url: str
    wait_time_seconds: int | None = Field(default=None, ge=0)
    max_number_of_messages: int | None = Field(default=None, ge=1)
    visibility_timeout: int | None = Field(default=None, ge=0)
    attribute_names: tuple[str, ...] | None = None
    message_system_attribute_names: tuple[str, ...] | None = None
    message_attribute_names: tuple[str, ...] | None = None
    receive_request_attempt_id: str | None = None

    @field_validator("queue_url")
    @classmethod
    def validate_queue_url(cls, v: str) -> str:
        """Ensure queue_url is non-empty after whitespace stripping."""
        v = v.strip()
        if not v:
            raise ValueError("queue_url must not be empty")
        return v

    def to_api_params(self) -> dict[str, Any]:
        """Return keyword arguments for the SQS ReceiveMessage call.

        Unset options are omitted so the service applies its own defaults.
        Sequences are rendered as fresh lists on every call.
        """
        params = self.model_dump(by_alias=True, exclude_none=True)
        for key, value in params.items():
            if isinstance(value, tuple):
                params[key] = list(value)
        return params


class Message(BaseModel):
    """A single message returned by the queue service.

    ``receipt_handle`` is required to delete the message; a message without
    one is handled but never deleted.
    """

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    message_id: str | None = None
    receipt_handle: str | None = None
    body: str | None = None
    md5_of_body: str | None = Field(default=None, alias="MD5OfBody")
    md5_of_message_attributes: str | None = Field(
        default=None, alias="MD5OfMessageAttributes"
    )
    attributes: dict[str, str] = Field(default_factory=dict)
    message_attributes: dict[str, Any] = Field(default_factory=dict)


class ReceiveResult(BaseModel):
    """Messages returned by one receive call, in service order."""

    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
        extra="ignore",
    )

    messages: list[Message] = Field(default_factory=list)

    @classmethod
    def from_api(cls, response: dict[str, Any]) -> "ReceiveResult":
        """Build a result from a boto3 ``receive_message`` response."""
        return cls.model_validate({"Messages": response.get("Messages") or []})

    def __len__(self) -> int:
        return len(self.messages)
