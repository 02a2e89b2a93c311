"""
User Account Service Routes Registry

Defines all API routes exposed by the service.
Route metadata is served from the /info endpoint.
"""

from typing import List, Dict, Any


DEFAULT_API_PREFIX = "/api"
DEFAULT_SERVICE_NAME = "user_account_service"


def users_base_path(api_prefix: str = DEFAULT_API_PREFIX) -> str:
    """Collection path for the user resource under the given prefix"""
    return f"{api_prefix.rstrip('/')}/users"


def get_all_routes(api_prefix: str = DEFAULT_API_PREFIX) -> List[Dict[str, Any]]:
    """
    Get all route definitions

    Args:
        api_prefix: Prefix the user resource is mounted under

    Returns:
        List of all route definitions
    """
    base_path = users_base_path(api_prefix)
    return [
        # Health & Info endpoints
        {
            "path": "/health",
            "methods": ["GET"],
            "auth_required": False,
            "description": "Service health check"
        },
        {
            "path": "/info",
            "methods": ["GET"],
            "auth_required": False,
            "description": "Service metadata and route listing"
        },

        # User Account Resource
        {
            "path": base_path,
            "methods": ["POST"],
            "auth_required": True,
            "description": "Create a user account"
        },
        {
            "path": f"{base_path}/{{user_id}}",
            "methods": ["GET", "PUT", "DELETE"],
            "auth_required": True,
            "description": "Read, replace or delete a user account"
        },
    ]


def get_route_summary(api_prefix: str = DEFAULT_API_PREFIX) -> Dict[str, Any]:
    """Compact route counts for service info"""
    routes = get_all_routes(api_prefix)
    return {
        "route_count": len(routes),
        "base_path": users_base_path(api_prefix),
        "public_count": sum(1 for r in routes if not r["auth_required"]),
        "protected_count": sum(1 for r in routes if r["auth_required"]),
    }


def get_service_metadata(
    service_name: str = DEFAULT_SERVICE_NAME, version: str = "1.0.0"
) -> Dict[str, Any]:
    """Service metadata for the given deployment name and version"""
    return {
        "service_name": service_name,
        "version": version,
        "tags": ["user-microservice", "user-account"],
        "capabilities": [
            "user_create",
            "user_read",
            "user_replace",
            "user_delete",
            "problem_details"
        ]
    }
