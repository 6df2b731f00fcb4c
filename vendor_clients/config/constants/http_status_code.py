from enum import Enum


class HttpStatusCode(Enum):
    """HTTP status codes the transport branches on"""

    OK = 200
    NO_CONTENT = 204
    # First code past the 2xx success range
    MULTIPLE_CHOICES = 300
