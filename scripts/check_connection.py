"""Check that the bridge, the tenant's IdP and the workflow engine are wired up.

Usage:
    uv run python -m scripts.check_connection [access_token]
Reads UTB_BASE_URL and UTB_TENANT_ID from the environment or .env; the
token comes from the argument or UTB_ACCESS_TOKEN. Exits 1 on failure.
"""

import asyncio
import sys

from usertasks.client import UserTasksClient
from usertasks.core.config import get_settings
from usertasks.domain.exceptions import UserTasksException
from usertasks.shared.telemetry import setup_from_settings, setup_logging


async def main() -> None:
    """Run the /init check and list the tenant's identity providers."""
    access_token = sys.argv[1] if len(sys.argv) > 1 else None

    settings = get_settings()
    setup_logging()
    telemetry = setup_from_settings(settings)
    try:
        client = UserTasksClient.from_settings(settings, access_token)
    except ValueError as e:
        print(str(e), file=sys.stderr)
        sys.exit(1)

    try:
        async with client:
            config = await client.public.get_identity_provider_config()
    except UserTasksException as e:
        print(f"Connection check failed: {e.error_code}: {e.message}", file=sys.stderr)
        sys.exit(1)
    finally:
        telemetry.shutdown()

    print(f"Connected to {settings.base_url} (tenant {settings.tenant_id})")
    for provider in config.providers:
        print(f"  {provider.vendor.value}: {provider.label_name} ({provider.issuer})")


if __name__ == "__main__":
    asyncio.run(main())
