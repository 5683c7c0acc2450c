# persian_datepicker/config.py

import os
import logging

BASE_DIR = os.path.dirname(os.path.abspath(__file__))

# --- Parsing Configuration ---
# Four-digit years at or above this value are read as Gregorian, below it as Persian.
# Persian 1700 falls in Gregorian 2321, so real Persian input never reaches it.
GREGORIAN_PIVOT_YEAR = 1700

# --- Logging Configuration ---
LOGS_DIR = os.path.join(os.path.dirname(BASE_DIR), "logs")
LOG_FILE_NAME = "app.log"
LOG_FILE_PATH = os.path.join(LOGS_DIR, LOG_FILE_NAME)

LOG_LEVEL = logging.DEBUG  # می‌توانید از logging.INFO, logging.WARNING, logging.ERROR هم استفاده کنید
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(module)s.%(funcName)s:%(lineno)d - %(message)s'

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': LOG_FORMAT,
            'datefmt': '%Y-%m-%d %H:%M:%S',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'standard',
            'level': LOG_LEVEL,
        },
        'file': {
            'class': 'logging.handlers.RotatingFileHandler',
            'formatter': 'standard',
            'filename': LOG_FILE_PATH,
            'maxBytes': 1024*1024*5,  # 5 MB
            'backupCount': 5,
            'level': logging.INFO,
            'encoding': 'utf-8',
        },
    },
    'root': {
        'handlers': ['console', 'file'],
        'level': LOG_LEVEL,
    },
}
