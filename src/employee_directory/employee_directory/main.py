from __future__ import annotations

import logging
from datetime import datetime
from typing import Callable, Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from .common.datetime_utils import now_utc
from .common.logging import configure_logging
from .common.responses import register_error_handlers
from .companies.controller import register as register_companies
from .container import build_container
from .departments.controller import register as register_departments
from .employees.controller import register as register_employees
from .settings import DirectoryConfig, load_config
from .storage.bootstrap import ensure_admin_user, ensure_store
from .users.controller import register as register_users

LOGGER = logging.getLogger(__name__)


def create_app(config: Optional[DirectoryConfig] = None, *, clock: Callable[[], datetime] = now_utc) -> Flask:
    if config is None:
        load_dotenv(override=False)
        config = load_config()

    configure_logging(config.log_level)

    app = Flask(__name__)
    app.config["DEBUG"] = config.debug
    app.json.ensure_ascii = False

    container = build_container(config=config, clock=clock)
    app.extensions["employee_directory"] = container

    if config.auto_init_store and ensure_store(container.store):
        LOGGER.info("Created data file %s", config.data_path)
    if config.auto_seed_admin:
        ensure_admin_user(
            container.users_repo,
            container.hasher,
            username=config.admin_username,
            password=config.admin_password,
        )

    LOGGER.info("Employee directory ready (data=%s, debug=%s)", config.data_path, config.debug)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"status": "ok"})

    register_error_handlers(app)
    register_users(app, container)
    register_companies(app, container)
    register_departments(app, container)
    register_employees(app, container)

    return app
