"""
Client resources for the Synatra web API, which indexes claim records.
"""

from synatra.rest_api.resources import BaseResource, ClaimsResource

__all__ = ["BaseResource", "ClaimsResource"]
