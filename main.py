import sys

from loguru import logger

from rolegate import Permission, PermissionManager, Role


def main():
    if len(sys.argv) < 2:
        logger.error("Usage: python main.py <role[,role...]> [permission ...]")
        sys.exit(1)

    try:
        roles = [Role(name.strip()) for name in sys.argv[1].split(",") if name.strip()]
        permissions = [Permission(name) for name in sys.argv[2:]]
    except ValueError as e:
        logger.error(f"{e}")
        sys.exit(1)

    if not roles:
        logger.error("At least one role is required")
        sys.exit(1)

    manager = PermissionManager({"roles": roles})
    logger.info(f"Max role: {manager.get_max_role().value}")

    for permission in permissions:
        if manager.has_permission(permission):
            logger.success(f"{permission.value}: granted")
        else:
            logger.warning(f"{permission.value}: denied")


if __name__ == "__main__":
    main()
