"""UserTasksClient: entry point grouping the bridge's resource controllers.

Usage:
    async with UserTasksClient(
        base_url="http://localhost:8089",
        tenant_id="default",
        access_token=token,
    ) as client:
        page = await client.user.list_user_tasks(ListUserTasksParams(limit=10))

Entering the context (or calling UserTasksClient.connect) runs the /init
check, so a wrong URL, tenant or token fails at startup instead of at the
first real call. Build one client per session/token; there is no shared
process-wide instance.
"""

from __future__ import annotations

import httpx

from usertasks.client.admin import AdminController
from usertasks.client.group_management import GroupManagementController
from usertasks.client.init import InitController
from usertasks.client.public import PublicController
from usertasks.client.user import UserController
from usertasks.client.user_management import UserManagementController
from usertasks.core.config import Settings, get_settings
from usertasks.infrastructure.http.transport import (
    DEFAULT_TIMEOUT_SECONDS,
    UserTasksTransport,
)
from usertasks.shared.telemetry.logging import get_logger
from usertasks.shared.telemetry.tracing import traced

logger = get_logger(__name__)


class UserTasksClient:
    """Typed async client for one tenant of the User Tasks Bridge API.

    Attributes:
        user: Caller-scoped task operations, groups, user info and comments.
        admin: Unscoped task operations, assignment, definitions, users and groups.
        user_management: IdP user CRUD, group membership and admin role.
        group_management: IdP group CRUD.
        public: Identity provider configuration discovery.
        init: Connectivity check.
    """

    def __init__(
        self,
        base_url: str,
        tenant_id: str,
        access_token: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        """Create the client without contacting the server.

        Args:
            base_url: Bridge API root (e.g. http://localhost:8089); a
                trailing slash is ignored.
            tenant_id: Tenant every path is scoped to.
            access_token: OIDC access token sent as a bearer token.
            http_client: Optional shared httpx.AsyncClient (not closed by us).
            timeout: Request timeout when we create the httpx client.
        """
        self._transport = UserTasksTransport(
            base_url,
            tenant_id,
            access_token,
            http_client=http_client,
            timeout=timeout,
        )
        self.user = UserController(self._transport)
        self.admin = AdminController(self._transport)
        self.user_management = UserManagementController(self._transport)
        self.group_management = GroupManagementController(self._transport)
        self.init = InitController(self._transport)
        self.public = PublicController(self._transport)

    @property
    def base_url(self) -> str:
        return self._transport.base_url

    @property
    def tenant_id(self) -> str:
        return self._transport.tenant_id

    @classmethod
    def from_settings(
        cls,
        settings: Settings | None = None,
        access_token: str | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> "UserTasksClient":
        """Build a client from settings; access_token overrides UTB_ACCESS_TOKEN.

        Raises:
            ValueError: If no access token is given or configured.
        """
        settings = settings or get_settings()
        token = access_token or (
            settings.access_token.get_secret_value() if settings.access_token else None
        )
        if not token:
            raise ValueError(
                "An access token is required: pass access_token or set UTB_ACCESS_TOKEN."
            )
        return cls(
            settings.base_url,
            settings.tenant_id,
            token,
            http_client=http_client,
            timeout=settings.request_timeout_seconds,
        )

    @classmethod
    async def connect(
        cls,
        base_url: str,
        tenant_id: str,
        access_token: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> "UserTasksClient":
        """Create a client and run the /init check before returning it.

        Raises:
            UserTasksException: Classified error of a failed /init call; the
                client is closed before the error propagates.
        """
        client = cls(
            base_url, tenant_id, access_token, http_client=http_client, timeout=timeout
        )
        await client.verify_connection()
        return client

    @traced("utb.verify_connection")
    async def verify_connection(self) -> None:
        """Run /init; close the client and re-raise if it fails."""
        try:
            await self.init.check_connection()
        except Exception:
            logger.error(
                "User Tasks Bridge connection check failed for tenant %s at %s",
                self.tenant_id,
                self.base_url,
            )
            await self.aclose()
            raise
        logger.info(
            "Connected to User Tasks Bridge: tenant=%s, base_url=%s",
            self.tenant_id,
            self.base_url,
        )

    async def aclose(self) -> None:
        await self._transport.aclose()

    async def __aenter__(self) -> "UserTasksClient":
        await self.verify_connection()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.aclose()
