#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Print the profile of the logged in user, reading server, credentials and
logging settings from a configuration file (default
``~/.traduora/config.yaml``, or the path given as first argument)::

    server:
      host: localhost:8080
      use_http: true
    credentials:
      username: test@test.test
      password: ${TRADUORA_PASSWORD}
    logging:
      level: DEBUG
      json_format: false
"""

import sys

from traduora import TraduoraBuilder
from traduora.api.users import Me
from traduora.config import load_config
from traduora.logging_config import get_logger


def main():
    """Run the current user demonstration."""
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    config.logging.apply()
    logger = get_logger("examples.current_user")

    with TraduoraBuilder.from_config(config).build() as client:
        me = Me().query(client)
        logger.info("current_user", user_id=me.id.value, name=me.name, email=me.email)


if __name__ == "__main__":
    main()
