
from config import settings
from taskpilot.policy import AccessPolicy, resolve_policy

policy = resolve_policy(settings.access_policy)


async def get_policy() -> AccessPolicy:
    return policy
