import os

_ENV_MODULES = {
    "prod": "config.production",
    "production": "config.production",
    "test": "config.testing",
    "testing": "config.testing",
}


def get_settings_module() -> str:
    # Cho phép chỉ định thẳng module cấu hình (vd: chạy thử với cấu hình riêng)
    explicit = os.getenv("APP_SETTINGS_MODULE")
    if explicit:
        return explicit

    # Lấy môi trường từ APP_ENV; giá trị lạ đều quy về development
    env = os.getenv("APP_ENV", "development").strip().lower()
    return _ENV_MODULES.get(env, "config.development")
