"""
Placeholder client for the Classroom REST service.

The client holds connection settings and composes resource URLs from the
endpoint templates of the resource interfaces. It does not send requests,
authenticate or paginate.

Example usage:
    ```python
    from classroom_types import Client, CourseWorkInterface

    client = Client()
    url = client.resource_url(CourseWorkInterface, "456", course_id="123")
    # https://classroom.googleapis.com/v1/courses/123/courseWork/456
    ```
"""

import logging
import string
from typing import Optional, Type
from urllib.parse import quote

import httpx

from classroom_types.base import ResourceInterface
from classroom_types.config import ClientConfig
from classroom_types.errors import ClassroomTypesError

logger = logging.getLogger(__name__)


class Client:

    def __init__(self, config: Optional[ClientConfig] = None):
        self.config = config or ClientConfig()
        self._base_url = httpx.URL(self.config.service_endpoint.rstrip("/") + "/")
        logger.debug("Classroom client configured for %s", self._base_url)

    @property
    def base_url(self) -> httpx.URL:
        return self._base_url

    def resource_path(
        self,
        interface: Type[ResourceInterface],
        resource_id: Optional[str] = None,
        **path_params: str,
    ) -> str:
        """
        Versioned path of a collection, or of one resource when resource_id is given.

        Raises:
            ClassroomTypesError: If the endpoint template needs a parameter
                that was not supplied
        """
        template = interface.endpoint
        required = {
            field for _, field, _, _ in string.Formatter().parse(template) if field
        }
        missing = sorted(required - path_params.keys())
        if missing:
            raise ClassroomTypesError(
                f"Missing path parameters for {interface.__name__}: {', '.join(missing)}",
                details={"endpoint": template, "missing": missing},
            )
        path = template.format(**{k: quote(str(v), safe="") for k, v in path_params.items()})
        if resource_id is not None:
            path = f"{path}/{quote(str(resource_id), safe='')}"
        return f"{self.config.version_prefix}/{path}"

    def resource_url(
        self,
        interface: Type[ResourceInterface],
        resource_id: Optional[str] = None,
        **path_params: str,
    ) -> httpx.URL:
        return self._base_url.join(self.resource_path(interface, resource_id, **path_params))
