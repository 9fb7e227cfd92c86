import logging
import os
import sys
from logging.handlers import RotatingFileHandler

# --- ENV STEUERUNG ---
# AMBIENTIMPACT_DEBUG=true -> Konsole auf DEBUG
# AMBIENTIMPACT_DEBUG=false -> Sauberer Betrieb (INFO)
IS_DEBUG = os.getenv("AMBIENTIMPACT_DEBUG", "false").lower() == "true"
LOG_LEVEL = logging.DEBUG if IS_DEBUG else logging.INFO
LOG_DIR = os.getenv("AMBIENTIMPACT_LOG_DIR", "./logs")
LOG_FILE_NAME = "ambientimpact.log"

FORMATTER = logging.Formatter(
    "%(asctime)s | %(levelname)-7s | %(name)-15s | %(message)s",
    datefmt="%H:%M:%S"
)

class LogNoiseFilter(logging.Filter):
    """Filtert WebSocket- und Asset-Rauschen aus der Konsole, außer im Debug-Modus."""
    noise_keywords = ["WebSocket", "socket.io", "connection open", "connection closed", "/_nicegui/"]

    def __init__(self, debug: bool = IS_DEBUG):
        super().__init__()
        self.debug = debug

    def filter(self, record):
        if self.debug:
            return True
        return not any(keyword in record.getMessage() for keyword in self.noise_keywords)

def setup_logging(log_dir: str = None, debug: bool = None):
    if log_dir is None:
        log_dir = LOG_DIR
    if debug is None:
        debug = IS_DEBUG

    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, LOG_FILE_NAME)

    # 1. Root-Logger immer auf DEBUG, die Handler filtern dann
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)

    if root_logger.hasHandlers():
        root_logger.handlers.clear()

    # 2. Konsole
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(FORMATTER)
    console_handler.setLevel(logging.DEBUG if debug else logging.INFO)
    console_handler.addFilter(LogNoiseFilter(debug))
    root_logger.addHandler(console_handler)

    # 3. Datei: hier landet IMMER alles (DEBUG)
    file_handler = RotatingFileHandler(log_file, maxBytes=10*1024*1024, backupCount=5)
    file_handler.setFormatter(FORMATTER)
    file_handler.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)

    # 4. Drittanbieter leiser stellen
    third_party_level = logging.DEBUG if debug else logging.WARNING
    for l_name in ["uvicorn", "uvicorn.error", "uvicorn.access", "nicegui"]:
        l = logging.getLogger(l_name)
        l.setLevel(third_party_level)
        l.handlers = root_logger.handlers
        l.propagate = False

    logging.info(f"✨ Ambient.Impact Logging initialisiert (Level: {'DEBUG' if debug else 'INFO'})")
    return log_file

def get_logger(name: str):
    return logging.getLogger(name)
