"""User-facing error messages, keyed by locale."""

from model_catalog.core.config import settings

MESSAGES: dict[str, dict[str, str]] = {
    "en": {
        "models_fetch_failed": "Failed to fetch model information",
        "model_not_found": "Model not found",
        "model_test_failed": "Model test failed",
        "internal_error": "Internal server error",
    },
    "zh": {
        "models_fetch_failed": "获取模型信息失败",
        "model_not_found": "模型不存在",
        "model_test_failed": "模型测试失败",
        "internal_error": "服务器内部错误",
    },
}


def get_message(key: str, locale: str | None = None) -> str:
    """Return the message for `key` in `locale` (defaults to settings.LOCALE).

    Unknown locales fall back to English.
    """
    catalog = MESSAGES.get(locale or settings.LOCALE, MESSAGES["en"])
    return catalog[key]
