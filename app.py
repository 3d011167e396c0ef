import logging
import sys

from config import load_config, load_log_level
from exceptions import PublicIpError
from logger import setup_logging
from services.ip_service import IpService

logger = logging.getLogger(__name__)


def main() -> int:
    setup_logging(load_log_level())
    config = load_config()

    try:
        address = IpService().get_public_ip(
            config.service,
            config.user_agent,
            config.connect_timeout,
            config.read_timeout,
        )
    except PublicIpError as e:
        logger.error("⚠️ Could not determine public IP via %s: %s", config.service.name, e)
        return 1

    print(address)
    return 0


if __name__ == '__main__':
    sys.exit(main())
