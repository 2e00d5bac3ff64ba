from __future__ import annotations

import logging
import os

from simpleconf import ApplicationPropertiesListener, DirectoryResourceContext
from simpleconf.config import ConfigLoader, YamlConfigLoader
from simpleconf.config.models import ConfigLoadRequest
from simpleconf.logging import init_logging


def main() -> None:
    loader: ConfigLoader = YamlConfigLoader()
    config = loader.load(ConfigLoadRequest(yaml_path="examples/simpleconf.yaml"))
    init_logging(config.logging)

    listener = ApplicationPropertiesListener.from_config(config)
    listener.context_initialized(DirectoryResourceContext("examples/webapp"))

    logger = logging.getLogger("smoke")
    logger.info("greeting=%s", os.environ.get("greeting"))
    logger.info("database.url=%s", os.environ.get("database.url"))


if __name__ == "__main__":
    main()
