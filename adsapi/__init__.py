"""
Client library and wrapper generator for the AdWords and DFP SOAP APIs.

- api: AdsApi entry point returning service wrappers
- build: wrapper class generation from WSDL type registries
- soap: type registry, typed objects, marshaller and zeep transport
- core: configuration, errors and logging
"""

__version__ = "0.1.0"

from .api import AdsApi  # noqa: E402
from .core.errors import (  # noqa: E402
    AdsApiError,
    ApiException,
    HttpError,
    OAuth2VerificationRequired,
)

__all__ = [
    "AdsApi",
    "AdsApiError",
    "ApiException",
    "HttpError",
    "OAuth2VerificationRequired",
    "__version__",
]
