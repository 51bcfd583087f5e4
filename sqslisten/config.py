"""Environment-driven settings for sqslisten."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sqslisten.core.message import ReceiveMessageRequest


class ListenerSettings(BaseSettings):
    """Settings loaded from ``SQSLISTEN_*`` environment variables or ``.env``."""

    model_config = SettingsConfigDict(
        env_prefix="SQSLISTEN_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    region: str = Field(default="us-east-1", description="AWS region")
    endpoint_url: str | None = Field(
        default=None,
        description="Alternate SQS endpoint, e.g. LocalStack",
    )
    queue_url: str = Field(default="", description="Queue to poll")
    wait_time_seconds: int | None = Field(default=None, ge=0, le=20)
    max_number_of_messages: int | None = Field(default=None, ge=1, le=10)
    visibility_timeout: int | None = Field(default=None, ge=0)
    log_level: str = "INFO"

    def receive_request(self) -> ReceiveMessageRequest:
        """Build the receive request described by these settings.

        Raises:
            pydantic.ValidationError: If queue_url is not set.
        """
        return ReceiveMessageRequest(
            queue_url=self.queue_url,
            wait_time_seconds=self.wait_time_seconds,
            max_number_of_messages=self.max_number_of_messages,
            visibility_timeout=self.visibility_timeout,
        )
