from fastapi import Request

from resalehub.core.config import Settings
from resalehub.db.dal import Database


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_db(request: Request) -> Database:
    return Database(get_app_settings(request).db_path)
