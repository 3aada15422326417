# -*- coding: utf-8 -*-
"""Application constants."""

APP_NAME = "pagesort"
APP_VERSION = "0.1.0"

DEFAULT_SETTINGS_FILE = "settings.json"

PDF_EXTENSIONS = (".pdf",)
IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".gif", ".bmp")

DEFAULT_ROW_HEIGHT = 36.0

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

DEFAULT_HOTKEYS = {
    "move_up": "Alt+Up",
    "move_down": "Alt+Down",
    "remove": "Delete",
    "preview": "Ctrl+P",
    "clear": "Ctrl+Shift+X",
}
