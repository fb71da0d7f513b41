"""
Resources for the Synatra API.
"""

from synatra.rest_api.resources.base import BaseResource
from synatra.rest_api.resources.claims import ClaimsResource

__all__ = ["BaseResource", "ClaimsResource"]
