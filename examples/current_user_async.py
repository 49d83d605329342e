#!/usr/bin/env python
"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Async variant of current_user.py, reading the same configuration file.
"""

import asyncio
import sys

from traduora import TraduoraBuilder
from traduora.api.users import Me
from traduora.config import load_config
from traduora.logging_config import get_logger


async def main():
    config = load_config(sys.argv[1] if len(sys.argv) > 1 else None)
    config.logging.apply()
    logger = get_logger("examples.current_user_async")

    client = await TraduoraBuilder.from_config(config).build_async()
    async with client:
        me = await Me().query_async(client)
        logger.info("current_user", user_id=me.id.value, name=me.name, email=me.email)


if __name__ == "__main__":
    asyncio.run(main())
