from pydantic import BaseModel, ConfigDict, Field


class GenerationResult(BaseModel):
    """Reply from a remote generation provider."""

    model_config = ConfigDict(frozen=True)

    content: str = Field(description="Generated text content")
    model: str = Field(description="Model that generated the response")
    usage: dict[str, int] | None = Field(
        default=None,
        description="Token usage information"
    )
