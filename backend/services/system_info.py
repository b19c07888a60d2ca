from config import settings
from database import is_embedded_database
from schemas.user import SystemInfo


class SystemInfoService:
    def get_system_info(self) -> SystemInfo:
        return SystemInfo(
            show_swagger_ui_link=settings.SHOW_SWAGGER_UI_LINK,
            embedded_database=is_embedded_database(),
        )


def get_system_info_service() -> SystemInfoService:
    return SystemInfoService()
