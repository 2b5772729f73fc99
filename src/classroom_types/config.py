from pydantic import BaseModel, Field

API_VERSION = 1
SERVICE_ENDPOINT = "https://classroom.googleapis.com"


class ClientConfig(BaseModel):
    """Connection settings a transport built on these types would consume."""
    service_endpoint: str = Field(SERVICE_ENDPOINT, description="Base URL of the Classroom service")
    api_version: int = Field(API_VERSION, ge=1)
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")

    @property
    def version_prefix(self) -> str:
        return f"v{self.api_version}"
